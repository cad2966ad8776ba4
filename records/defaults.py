"""
Compiled-in demo dataset.

Every fresh store starts from a deep copy of :data:`INITIAL_DB`; a
persisted snapshot is merged over it at the top level only.  Treat this
mapping as read-only.
"""
from __future__ import annotations

INITIAL_DB: dict = {
    'doctors': [
        {
            'id': 'DOC-001',
            'name': 'Dr. Meera Nair',
            'department': 'Cardiology',
            'slotsToday': 18,
            'slotsBooked': 14,
            'status': 'ON_DUTY',
        },
        {
            'id': 'DOC-002',
            'name': 'Dr. Karthik Rao',
            'department': 'Orthopedics',
            'slotsToday': 20,
            'slotsBooked': 17,
            'status': 'ON_DUTY',
        },
        {
            'id': 'DOC-003',
            'name': 'Dr. Anjali Sharma',
            'department': 'Pediatrics',
            'slotsToday': 16,
            'slotsBooked': 15,
            'status': 'IN_OT',
        },
        {
            'id': 'DOC-004',
            'name': 'Dr. Joseph Menon',
            'department': 'ICU / Critical Care',
            'slotsToday': 10,
            'slotsBooked': 9,
            'status': 'ICU_ROUNDS',
        },
    ],
    'patients': [
        {
            'id': 'UHID-20261',
            'name': 'Rahul Verma',
            'type': 'OPD',
            'department': 'Cardiology',
            'doctorId': 'DOC-001',
            'status': 'IN_CONSULT',
            'lastEvent': '10:08 AM · Entered room',
        },
        {
            'id': 'UHID-20262',
            'name': 'Anita Sharma',
            'type': 'OPD',
            'department': 'Orthopedics',
            'doctorId': 'DOC-002',
            'status': 'WAITING',
            'lastEvent': '09:56 AM · Checked-in',
        },
        {
            'id': 'UHID-20237',
            'name': 'Vikram Desai',
            'type': 'IPD',
            'department': 'ICU',
            'doctorId': 'DOC-004',
            'status': 'ICU_HIGH_RISK',
            'lastEvent': '10:02 AM · ABG sample sent',
        },
        {
            'id': 'UHID-20177',
            'name': 'Rohan Gupta',
            'type': 'ER',
            'department': 'Emergency',
            'doctorId': 'DOC-004',
            'status': 'TRIAGE',
            'lastEvent': '10:11 AM · Triage started',
        },
    ],
    'appointments': [
        {
            'id': 'APT-1001',
            'token': 'A-01',
            'patientName': 'Rahul Verma',
            'patientId': 'UHID-20261',
            'doctorId': 'DOC-001',
            'doctorName': 'Dr. Meera',
            'department': 'Cardiology',
            'type': 'OPD',
            'time': '10:00 AM',
            'status': 'CONFIRMED',
        },
        {
            'id': 'APT-1002',
            'token': 'A-02',
            'patientName': 'Anita Sharma',
            'patientId': 'UHID-20262',
            'doctorId': 'DOC-002',
            'doctorName': 'Dr. Karthik',
            'department': 'Orthopedics',
            'type': 'OPD',
            'time': '10:15 AM',
            'status': 'PENDING',
        },
        {
            'id': 'APT-1003',
            'token': 'C-01',
            'patientName': 'Vikram Desai',
            'patientId': 'UHID-20237',
            'doctorId': 'DOC-004',
            'doctorName': 'Dr. Menon',
            'department': 'ICU',
            'type': 'IPD_REVIEW',
            'time': 'Ongoing',
            'status': 'CHECKED_IN',
        },
    ],
    'pharmacyItems': [
        {
            'id': 'DRG-001',
            'name': 'Inj. Adrenaline 1mg/ml',
            'code': 'DRG-001',
            'form': 'Ampoule',
            'stock': 18,
            'unit': 'amp',
            'status': 'CRITICAL',
            'lastMovement': 'Today · Issued to ER',
        },
        {
            'id': 'DRG-050',
            'name': 'Tab. Paracetamol 500mg',
            'code': 'DRG-050',
            'form': 'Tablet',
            'stock': 9420,
            'unit': 'tab',
            'status': 'OK',
            'lastMovement': 'Today · Multiple wards',
        },
        {
            'id': 'CON-200',
            'name': 'N95 mask',
            'code': 'CON-200',
            'form': 'Consumable',
            'stock': 0,
            'unit': 'pcs',
            'status': 'OUT',
            'lastMovement': 'Yesterday · Last lot issued',
        },
    ],
    'labReports': [
        {
            'id': 'LAB-0001',
            'testName': 'CBC',
            'patientName': 'Rahul Verma',
            'patientId': 'UHID-20261',
            'department': 'Pathology',
            'status': 'COMPLETED',
            'tatMinutes': 35,
            'collectedAt': '09:20 AM',
            'verifiedAt': '09:55 AM',
        },
        {
            'id': 'LAB-0002',
            'testName': 'Troponin I',
            'patientName': 'Rohan Gupta',
            'patientId': 'UHID-20177',
            'department': 'Biochemistry',
            'status': 'IN_PROGRESS',
            'tatMinutes': None,
            'collectedAt': '10:05 AM',
            'verifiedAt': None,
        },
    ],
    'billing': {
        'todayRevenue': 195500,
        'todayBillsCount': 73,
        'averageBillValue': 2680,
        'pendingClearance': 5,
        'lastSync': '10:10 AM',
    },
    # summary tiles; the four count fields are derived at read time
    'dashboardSnapshot': {
        'dailyConsultations': 182,
        'revenueToday': 195500,
        'bedOccupancyPercent': 76,
        'emergencyCases': 14,
        'staffOnDuty': 89,
        'lastUpdated': '10:12 AM',
    },
}
