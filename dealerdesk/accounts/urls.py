from django.urls import path
from . import views

urlpatterns = [
    path('register', views.RegisterView.as_view(), name='register'),
    path('login', views.LoginView.as_view(), name='login'),
    path('logout', views.LogoutView.as_view(), name='logout'),
    path('user', views.CurrentUserView.as_view(), name='current_user'),
    path('user/<int:pk>', views.UserUpdateView.as_view(), name='user_update'),
]
