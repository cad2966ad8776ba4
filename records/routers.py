"""
URL mappings for the HealthSight demo API.

Paths follow the front-end page scripts; trailing slashes are omitted
(``APPEND_SLASH = False``).
"""
from django.urls import path, include

from .auth_views import login_view
from .views import appointments, dashboard, dev, doctors, health, lab_reports, patients, pharmacy

urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # Authentication
    path('api/auth/login', login_view, name='login_view'),
    # Dashboard & billing
    path('api/dashboard/snapshot', dashboard.dashboard_snapshot),
    path('api/billing/summary', dashboard.billing_summary),
    # Doctors
    path('api/doctors', doctors.doctors_list),
    path('api/doctors/<str:pk>', doctors.doctor_detail),
    # Patients
    path('api/patients', patients.patients_list),
    path('api/patients/<str:pk>', patients.patient_detail),
    # Appointments
    path('api/appointments', appointments.appointments),
    path('api/appointments/<str:pk>', appointments.appointment_detail),
    path('api/appointments/<str:pk>/status', appointments.appointment_update_status),
    # Pharmacy
    path('api/pharmacy/items', pharmacy.pharmacy_items),
    path('api/pharmacy/low-stock', pharmacy.low_stock),
    # Lab
    path('api/lab-reports', lab_reports.lab_reports),
    # Dev helpers
    path('api/dev/reset', dev.reset_demo),
]
