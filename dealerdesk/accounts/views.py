import logging

from django.contrib.auth import authenticate, get_user_model, login, logout
from drf_spectacular.utils import extend_schema
from rest_framework import generics, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from dealerdesk.accounts.models import is_admin_user
from dealerdesk.accounts.serializers import LoginSerializer, RegisterSerializer, UserSerializer

logger = logging.getLogger(__name__)

User = get_user_model()


class RegisterView(APIView):
    """
    Create a staff account and start a session for it.
    """
    permission_classes = [AllowAny]

    @extend_schema(summary="Register", request=RegisterSerializer, responses={201: UserSerializer})
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        login(request, user)
        logger.info(f"Registered user {user.username}")
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(summary="Log in", request=LoginSerializer, responses={200: UserSerializer})
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = authenticate(request, **serializer.validated_data)
        if user is None:
            logger.warning(f"Failed login for {serializer.validated_data['username']}")
            return Response({"message": "Invalid username or password"}, status=status.HTTP_401_UNAUTHORIZED)
        login(request, user)
        return Response(UserSerializer(user).data)


class LogoutView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(summary="Log out", request=None, responses={200: None})
    def post(self, request):
        logout(request)
        return Response(status=status.HTTP_200_OK)


class CurrentUserView(APIView):
    """The user attached to the current session."""
    permission_classes = [IsAuthenticated]

    @extend_schema(summary="Current user", responses={200: UserSerializer})
    def get(self, request):
        return Response(UserSerializer(request.user).data)


class UserUpdateView(generics.UpdateAPIView):
    """
    Update a user's own profile. Admins may edit anyone and change roles;
    a role sent by a non-admin is ignored.
    """
    queryset = User.objects.select_related('profile')
    serializer_class = UserSerializer
    permission_classes = [IsAuthenticated]

    def update(self, request, *args, **kwargs):
        target = self.get_object()
        admin = is_admin_user(request.user)
        if target.pk != request.user.pk and not admin:
            return Response({"message": "Unauthorized action"}, status=status.HTTP_403_FORBIDDEN)

        data = request.data.copy()
        if not admin:
            data.pop('role', None)

        serializer = self.get_serializer(target, data=data, partial=kwargs.pop('partial', False))
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)
