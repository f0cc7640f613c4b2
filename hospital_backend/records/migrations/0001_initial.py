import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Patient',
            fields=[
                ('mrn', models.CharField(max_length=32, primary_key=True, serialize=False, verbose_name='MRN')),
                ('patient_name', models.CharField(max_length=200)),
                ('age', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('gender', models.CharField(blank=True, default='', max_length=20)),
                ('admission_date', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('specialty', models.CharField(db_index=True, max_length=100)),
                ('patient_status', models.CharField(blank=True, default='Active', max_length=50)),
                ('diagnosis', models.TextField(blank=True, default='')),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Patient',
                'verbose_name_plural': 'Patients',
                'db_table': 'patients',
                'ordering': ['-admission_date'],
            },
        ),
        migrations.CreateModel(
            name='Consultation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('mrn', models.CharField(db_index=True, max_length=32, verbose_name='MRN')),
                ('patient_name', models.CharField(max_length=200)),
                ('age', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('gender', models.CharField(blank=True, default='', max_length=20)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('consultation_specialty', models.CharField(db_index=True, max_length=100)),
                ('status', models.CharField(blank=True, default='Pending', max_length=50)),
                ('requesting_department', models.CharField(blank=True, default='', max_length=100)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Consultation',
                'verbose_name_plural': 'Consultations',
                'db_table': 'consultations',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='ClinicAppointment',
            fields=[
                ('appointment_id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('patient_name', models.CharField(max_length=200)),
                ('patient_medical_number', models.CharField(db_index=True, max_length=32)),
                ('clinic_specialty', models.CharField(max_length=100)),
                ('appointment_type', models.CharField(choices=[('Urgent', 'Urgent'), ('Regular', 'Regular')], default='Regular', max_length=10)),
                ('notes', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
            ],
            options={
                'verbose_name': 'Clinic appointment',
                'verbose_name_plural': 'Clinic appointments',
                'db_table': 'clinic_appointments',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='DailyReport',
            fields=[
                ('report_id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('report_date', models.DateField(db_index=True)),
                ('report_content', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('patient', models.ForeignKey(db_column='patient_id', on_delete=django.db.models.deletion.CASCADE, related_name='daily_reports', to='records.patient')),
            ],
            options={
                'verbose_name': 'Daily report',
                'verbose_name_plural': 'Daily reports',
                'db_table': 'daily_reports',
                'ordering': ['-created_at'],
            },
        ),
    ]
