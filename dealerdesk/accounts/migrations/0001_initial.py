from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='StaffProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('role', models.CharField(choices=[('admin', 'Admin'), ('sales_manager', 'Sales Manager'), ('sales_rep', 'Sales Representative'), ('inventory_manager', 'Inventory Manager')], default='sales_manager', max_length=32)),
                ('phone', models.CharField(blank=True, max_length=32)),
                ('profile_image', models.CharField(blank=True, help_text='URL of the profile picture', max_length=500)),
                ('facebook_id', models.CharField(blank=True, max_length=255)),
                ('instagram_id', models.CharField(blank=True, max_length=255)),
                ('twitter_id', models.CharField(blank=True, max_length=255)),
                ('linkedin_id', models.CharField(blank=True, max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Staff Profile',
                'verbose_name_plural': 'Staff Profiles',
            },
        ),
    ]
