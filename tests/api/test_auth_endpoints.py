from django.contrib.auth import get_user_model

from dealerdesk.accounts.models import StaffProfile

User = get_user_model()


def test_register_creates_profile_and_session(api_client):
    response = api_client.post("/api/register", {
        "username": "newrep",
        "password": "long-enough-1",
        "email": "newrep@example.com",
        "first_name": "New",
    }, format="json")

    assert response.status_code == 201
    assert response.json()["role"] == StaffProfile.Role.SALES_MANAGER
    assert api_client.get("/api/user").json()["username"] == "newrep"


def test_register_rejects_short_password(api_client):
    response = api_client.post("/api/register", {
        "username": "shorty", "password": "short", "email": "s@example.com",
    }, format="json")
    assert response.status_code == 400


def test_login_and_logout(api_client, sales_rep):
    response = api_client.post("/api/login", {"username": "rep", "password": "rep-password-1"}, format="json")
    assert response.status_code == 200
    assert response.json()["email"] == "rep@example.com"

    api_client.post("/api/logout")
    assert api_client.get("/api/user").status_code == 403


def test_login_with_bad_password(api_client, sales_rep):
    response = api_client.post("/api/login", {"username": "rep", "password": "nope"}, format="json")
    assert response.status_code == 401


def test_user_updates_own_profile_but_not_role(rep_client, sales_rep):
    response = rep_client.patch(f"/api/user/{sales_rep.pk}", {"phone": "555-0199", "role": "admin"}, format="json")

    assert response.status_code == 200
    sales_rep.profile.refresh_from_db()
    assert sales_rep.profile.phone == "555-0199"
    assert sales_rep.profile.role == StaffProfile.Role.SALES_MANAGER


def test_user_cannot_edit_someone_else(rep_client, admin_user):
    response = rep_client.patch(f"/api/user/{admin_user.pk}", {"first_name": "Hacked"}, format="json")
    assert response.status_code == 403


def test_admin_can_change_roles(admin_client, sales_rep):
    response = admin_client.patch(f"/api/user/{sales_rep.pk}", {"role": "inventory_manager"}, format="json")

    assert response.status_code == 200
    sales_rep.profile.refresh_from_db()
    assert sales_rep.profile.role == StaffProfile.Role.INVENTORY_MANAGER


def test_superuser_gets_admin_role():
    user = User.objects.create_superuser(username="root", password="root-password-1", email="root@example.com")
    assert user.profile.role == StaffProfile.Role.ADMIN
