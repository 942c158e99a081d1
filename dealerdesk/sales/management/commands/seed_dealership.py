"""
Management command to seed the database with a demo dealership.
"""
from datetime import datetime, time, timedelta

import numpy as np
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from dealerdesk.core.services.history import generate_historical_series
from dealerdesk.core.services.months import parse_date
from dealerdesk.inventory.models import InventoryTransaction, Motorcycle, Supplier
from dealerdesk.sales.models import Customer, Sale

User = get_user_model()

# Demo history values run roughly 110-220; this scales them to sales per month
UNITS_PER_HISTORY_POINT = 1 / 20

SAMPLE_SUPPLIERS = [
    {"name": "Ironhorse Distribution", "contact_name": "Dana Reyes", "email": "orders@ironhorse.example", "phone": "555-0100"},
    {"name": "Pacific Moto Supply", "contact_name": "Kai Nakamura", "email": "sales@pacificmoto.example", "phone": "555-0142"},
]

SAMPLE_MOTORCYCLES = [
    {"make": "Honda", "model": "CBR650R", "year": 2024, "category": "Sport", "color": "Grand Prix Red",
     "price": 9899.0, "cost": 8100.0, "vin": "JH2RC9000RK000001", "stock": 8},
    {"make": "Yamaha", "model": "MT-07", "year": 2024, "category": "Naked", "color": "Cyan Storm",
     "price": 8199.0, "cost": 6700.0, "vin": "JYARM3000RA000002", "stock": 12},
    {"make": "Kawasaki", "model": "Ninja 400", "year": 2023, "category": "Sport", "color": "Lime Green",
     "price": 5299.0, "cost": 4300.0, "vin": "JKAEXKG10PA000003", "stock": 4},
    {"make": "Harley-Davidson", "model": "Street Glide", "year": 2024, "category": "Touring", "color": "Vivid Black",
     "price": 25999.0, "cost": 21500.0, "vin": "1HD1KRP10RB000004", "stock": 3},
    {"make": "BMW", "model": "R 1250 GS", "year": 2023, "category": "Adventure", "color": "Triple Black",
     "price": 18695.0, "cost": 15400.0, "vin": "WB10J1300PZ000005", "stock": 6},
]

SAMPLE_CUSTOMERS = [
    {"first_name": "Maria", "last_name": "Lopez", "email": "maria.lopez@example.com", "city": "Austin", "state": "TX"},
    {"first_name": "James", "last_name": "Okafor", "email": "j.okafor@example.com", "city": "Denver", "state": "CO"},
    {"first_name": "Priya", "last_name": "Shah", "email": "priya.shah@example.com", "city": "Portland", "state": "OR"},
    {"first_name": "Tom", "last_name": "Becker", "email": "tbecker@example.com", "city": "Madison", "state": "WI"},
]


class Command(BaseCommand):
    help = 'Seeds the database with demo inventory, customers and sales history'

    def add_arguments(self, parser):
        parser.add_argument('--months', type=int, default=12, help='Months of sales history to create')
        parser.add_argument('--seed', type=int, default=None, help='Seed for reproducible sales history')
        parser.add_argument('--no-sales', action='store_true', help='Skip generating sales history')

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write('Seeding demo dealership...')
        rng = np.random.default_rng(options['seed'])

        admin, created = User.objects.get_or_create(
            username='admin',
            defaults={'email': 'admin@dealerdesk.example', 'is_staff': True, 'is_superuser': True},
        )
        if created:
            admin.set_password('admin12345')
            admin.save()
            self.stdout.write(self.style.SUCCESS('  ✓ Created superuser "admin" (password: admin12345)'))

        for data in SAMPLE_SUPPLIERS:
            self._create(Supplier, 'name', data)

        motorcycles = []
        for data in SAMPLE_MOTORCYCLES:
            motorcycle = self._create(Motorcycle, 'vin', {**data, 'created_by': admin})
            motorcycle.status = motorcycle.status_for_stock(motorcycle.stock)
            motorcycle.save(update_fields=['status'])
            motorcycles.append(motorcycle)

        customers = [self._create(Customer, 'email', data) for data in SAMPLE_CUSTOMERS]

        if options['no_sales'] or Sale.objects.exists():
            self.stdout.write(self.style.WARNING('  Skipping sales history'))
        else:
            created_sales = self._seed_sales(options['months'], rng, admin, motorcycles, customers)
            self.stdout.write(self.style.SUCCESS(f'  ✓ Created {created_sales} sales over {options["months"]} months'))

        self.stdout.write(self.style.SUCCESS('\nSeeding complete!'))

    def _create(self, model, key, data):
        instance, created = model.objects.get_or_create(**{key: data[key]}, defaults=data)
        if created:
            self.stdout.write(self.style.SUCCESS(f'  ✓ Created {model._meta.verbose_name}: {instance}'))
        else:
            self.stdout.write(self.style.WARNING(f'  {model._meta.verbose_name} "{instance}" already exists, skipping'))
        return instance

    def _seed_sales(self, months, rng, seller, motorcycles, customers):
        """
        Shape monthly sales counts after the demo history generator so the
        recorded-sales forecasts show the same trend and seasonality.
        """
        history = generate_historical_series(months, rng=rng, today=timezone.localdate())
        sales = []
        for point in history:
            month_start = parse_date(point.date)
            for _ in range(max(1, round(point.value * UNITS_PER_HISTORY_POINT))):
                motorcycle = motorcycles[rng.integers(len(motorcycles))]
                day = month_start + timedelta(days=int(rng.integers(28)))
                sales.append(Sale(
                    motorcycle=motorcycle,
                    customer=customers[rng.integers(len(customers))],
                    seller=seller,
                    sale_date=timezone.make_aware(datetime.combine(day, time(hour=12))),
                    sale_price=round(motorcycle.price * float(rng.uniform(0.92, 1.0)), 2),
                    payment_method=rng.choice(Sale.PaymentMethod.values),
                ))

        Sale.objects.bulk_create(sales)
        # bulk_create skips signals, so record the stock movements explicitly
        for motorcycle in motorcycles:
            sold = sum(1 for sale in sales if sale.motorcycle_id == motorcycle.pk)
            if sold:
                InventoryTransaction.objects.create(
                    motorcycle=motorcycle,
                    transaction_type=InventoryTransaction.Type.PURCHASE,
                    quantity=sold,
                    notes='Demo restock covering seeded sales',
                    created_by=seller,
                )
                InventoryTransaction.objects.create(
                    motorcycle=motorcycle,
                    transaction_type=InventoryTransaction.Type.SALE,
                    quantity=-sold,
                    notes='Seeded sales history',
                    created_by=seller,
                )
        return len(sales)
