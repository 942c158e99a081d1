from datetime import datetime, timezone as dt_timezone

from dealerdesk.sales.models import Customer, Sale


def _sale(motorcycle, customer, seller, when, price=8000.0, **extra):
    return Sale.objects.create(
        motorcycle=motorcycle, customer=customer, seller=seller,
        sale_date=when, sale_price=price, payment_method=Sale.PaymentMethod.FINANCING, **extra,
    )


def test_customer_crud(rep_client):
    response = rep_client.post("/api/customers", {
        "first_name": "James", "last_name": "Okafor", "email": "j.okafor@example.com",
    }, format="json")
    assert response.status_code == 201
    assert response.json()["full_name"] == "James Okafor"

    customer_id = response.json()["id"]
    response = rep_client.patch(f"/api/customers/{customer_id}", {"city": "Denver"}, format="json")
    assert response.json()["city"] == "Denver"


def test_only_admin_deletes_customers(rep_client, customer):
    assert rep_client.delete(f"/api/customers/{customer.pk}").status_code == 403


def test_customer_with_sales_cannot_be_deleted(admin_client, admin_user, customer, motorcycle):
    _sale(motorcycle, customer, admin_user, datetime(2024, 5, 1, tzinfo=dt_timezone.utc))

    response = admin_client.delete(f"/api/customers/{customer.pk}")

    assert response.status_code == 409
    assert Customer.objects.filter(pk=customer.pk).exists()


def test_record_sale_sets_seller(rep_client, sales_rep, motorcycle, customer):
    response = rep_client.post("/api/sales", {
        "motorcycle": motorcycle.pk,
        "customer": customer.pk,
        "sale_price": 7999.0,
        "payment_method": "cash",
    }, format="json")

    assert response.status_code == 201
    data = response.json()
    assert data["seller"] == sales_rep.pk
    assert data["customer_name"] == "Maria Lopez"
    assert data["motorcycle_name"] == "2024 Yamaha MT-07"


def test_sale_price_must_be_positive(rep_client, motorcycle, customer):
    response = rep_client.post("/api/sales", {
        "motorcycle": motorcycle.pk, "customer": customer.pk, "sale_price": 0, "payment_method": "cash",
    }, format="json")
    assert response.status_code == 400


def test_sales_in_range(rep_client, sales_rep, motorcycle, customer):
    _sale(motorcycle, customer, sales_rep, datetime(2024, 3, 31, 23, 0, tzinfo=dt_timezone.utc))
    _sale(motorcycle, customer, sales_rep, datetime(2024, 4, 15, 9, 0, tzinfo=dt_timezone.utc))
    _sale(motorcycle, customer, sales_rep, datetime(2024, 5, 1, 0, 30, tzinfo=dt_timezone.utc))

    response = rep_client.get("/api/sales/range", {"start_date": "2024-03-31", "end_date": "2024-04-30"})

    assert response.status_code == 200
    assert len(response.json()) == 2


def test_range_requires_both_dates(rep_client):
    response = rep_client.get("/api/sales/range", {"start_date": "2024-03-01"})
    assert response.status_code == 400


def test_range_rejects_bad_dates(rep_client):
    response = rep_client.get("/api/sales/range", {"start_date": "March", "end_date": "April"})
    assert response.status_code == 400


def test_top_selling_excludes_cancelled(rep_client, sales_rep, motorcycle, customer):
    when = datetime(2024, 5, 1, tzinfo=dt_timezone.utc)
    _sale(motorcycle, customer, sales_rep, when, price=8000.0)
    _sale(motorcycle, customer, sales_rep, when, price=8100.0)
    _sale(motorcycle, customer, sales_rep, when, price=9000.0, status=Sale.Status.CANCELLED)

    response = rep_client.get("/api/dashboard/top-selling", {"limit": "5"})

    assert response.status_code == 200
    top = response.json()[0]
    assert top["unitsSold"] == 2
    assert top["totalSales"] == 16100.0


def test_monthly_sales_defaults_to_twelve_months(rep_client):
    response = rep_client.get("/api/dashboard/monthly-sales")

    assert response.status_code == 200
    assert len(response.json()) == 12
    assert all(point["value"] == 0 for point in response.json())


def test_monthly_sales_rejects_bad_metric(rep_client):
    response = rep_client.get("/api/dashboard/monthly-sales", {"metric": "profit"})
    assert response.status_code == 400


def test_dashboard_requires_login(api_client):
    assert api_client.get("/api/dashboard/top-selling").status_code == 403
