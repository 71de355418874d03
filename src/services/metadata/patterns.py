"""
Pattern tables for document metadata extraction.

Each category has its own table so rules can be tested and extended
independently. Keyword lists are matched against the lowercased text;
regular expressions run against the raw text unless noted.
"""
import re
from typing import Dict, List, Pattern

# ============================================================================
# Dates
# ============================================================================

_MONTH = (
    r'(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|Aug(?:ust)?|'
    r'Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)'
)
_DATE_SEPARATOR = r'[/\-.–]'

DATE_PATTERNS: List[Pattern[str]] = [
    # 05/10/2023, 5-10-23, 05.10.2023
    re.compile(rf'\b\d{{1,2}}{_DATE_SEPARATOR}\d{{1,2}}{_DATE_SEPARATOR}\d{{2,4}}\b'),
    # 2023-05-10, 2023/5/10
    re.compile(rf'\b\d{{4}}{_DATE_SEPARATOR}\d{{1,2}}{_DATE_SEPARATOR}\d{{1,2}}\b'),
    # May 10, 2023 / Sept 3rd 2023
    re.compile(rf'\b{_MONTH}\.?\s+\d{{1,2}}(?:st|nd|rd|th)?,?\s+\d{{4}}\b', re.IGNORECASE),
    # 10 May 2023 / 3rd Sept, 2023
    re.compile(rf'\b\d{{1,2}}(?:st|nd|rd|th)?\s+{_MONTH}\.?,?\s+\d{{4}}\b', re.IGNORECASE),
]

DATE_TYPE_KEYWORDS: Dict[str, List[str]] = {
    'appointment': ['appointment', 'visit date', 'seen on', 'consultation'],
    'admission': ['admission', 'admitted', 'date of admission'],
    'discharge': ['discharge', 'discharged'],
    'procedure': ['procedure date', 'date of procedure', 'surgery date', 'operation date', 'procedure'],
    'test': ['test date', 'date of test', 'collected', 'collection date', 'specimen date', 'exam date'],
    'followup': ['follow-up', 'follow up', 'followup', 'return visit', 'next visit'],
}

# ============================================================================
# People and organizations
# ============================================================================

PROVIDER_CREDENTIALS = ['MD', 'DO', 'NP', 'PA', 'RN']

PROVIDER_PATTERNS: List[Pattern[str]] = [
    # Dr. Firstname Lastname
    re.compile(r'\bDr\.?[ \t]+[A-Z][a-z]+[ \t]+[A-Z][a-z]+'),
    # Firstname Lastname, MD
    re.compile(
        r'\b[A-Z][a-z]+[ \t]+[A-Z][a-z]+,[ \t]*(?:' + '|'.join(PROVIDER_CREDENTIALS) + r')\b'
    ),
]

INSTITUTION_KEYWORDS = [
    'hospital',
    'medical center',
    'clinic',
    'health system',
    'healthcare',
    'institute',
]

# Lines at or above this length are prose, not an institution name
INSTITUTION_MAX_LINE_LENGTH = 100

DEPARTMENT_KEYWORDS = [
    'department of',
    'dept.',
    'division of',
    'cardiology',
    'radiology',
    'oncology',
    'neurology',
    'pediatrics',
    'orthopedics',
    'emergency',
    'internal medicine',
]

# Keyword plus the trailing run up to the next newline, period or comma
DEPARTMENT_PATTERNS: List[Pattern[str]] = [
    re.compile(rf'\b{re.escape(keyword)}[^\n.,]*', re.IGNORECASE)
    for keyword in DEPARTMENT_KEYWORDS
]

SPECIALTIES = [
    'cardiology',
    'dermatology',
    'endocrinology',
    'gastroenterology',
    'hematology',
    'nephrology',
    'neurology',
    'obstetrics',
    'gynecology',
    'oncology',
    'ophthalmology',
    'orthopedics',
    'pediatrics',
    'psychiatry',
    'pulmonology',
    'radiology',
    'urology',
]

# ============================================================================
# Anatomy and tests
# ============================================================================

BODY_AREAS = [
    'head', 'neck', 'chest', 'abdomen', 'pelvis', 'spine',
    'back', 'shoulder', 'arm', 'elbow', 'wrist', 'hand',
    'hip', 'leg', 'knee', 'ankle', 'foot', 'heart',
    'lung', 'liver', 'kidney', 'brain', 'breast', 'colon',
    'stomach', 'skin',
]

# Matched against the lowercased text; optional plural "s"
BODY_AREA_PATTERNS: Dict[str, Pattern[str]] = {
    area: re.compile(rf'\b{re.escape(area)}s?\b') for area in BODY_AREAS
}

TEST_INDICATORS = [
    'test performed',
    'examination',
    'imaging',
    'laboratory',
    'results',
    'findings',
]

TEST_TYPES = [
    'blood test',
    'urinalysis',
    'x-ray',
    'mri',
    'ct scan',
    'ultrasound',
    'ecg',
    'ekg',
    'echocardiogram',
    'biopsy',
    'colonoscopy',
    'endoscopy',
    'mammogram',
    'pet scan',
]

# ============================================================================
# Medications and diagnoses
# ============================================================================

MEDICATION_SUFFIXES = ['pril', 'olol', 'statin', 'cillin', 'mycin', 'cycline', 'azole', 'ine', 'ide']

# Heuristic: any capitalized word with a pharmacological suffix (e.g. "Routine" also matches)
MEDICATION_PATTERN: Pattern[str] = re.compile(
    r'\b[A-Z][a-z]+(?:' + '|'.join(MEDICATION_SUFFIXES) + r')\b'
)

MEDICATION_TYPE_KEYWORDS: Dict[str, List[str]] = {
    'antibiotic': ['antibiotic', 'amoxicillin', 'penicillin', 'azithromycin', 'ciprofloxacin', 'doxycycline'],
    'painkiller': ['painkiller', 'pain reliever', 'analgesic', 'ibuprofen', 'acetaminophen',
                   'paracetamol', 'naproxen', 'opioid', 'morphine'],
    'blood pressure': ['blood pressure', 'antihypertensive', 'lisinopril', 'amlodipine',
                       'metoprolol', 'losartan'],
    'diabetes': ['diabetes', 'diabetic', 'insulin', 'metformin', 'glipizide'],
    'cholesterol': ['cholesterol', 'statin', 'atorvastatin', 'simvastatin', 'rosuvastatin'],
}

DIAGNOSIS_TRIGGERS = ['diagnosis', 'diagnosed with', 'impression', 'assessment']

# Trigger, optional colon, then 5-100 characters up to the next newline or period.
# The capture starts on a visible, non-colon character; shorter stripped matches are dropped.
DIAGNOSIS_MIN_LENGTH = 5
DIAGNOSIS_PATTERNS: List[Pattern[str]] = [
    re.compile(rf'\b{re.escape(trigger)}\s*:?\s*([^\s:][^\n.]{{4,99}})', re.IGNORECASE)
    for trigger in DIAGNOSIS_TRIGGERS
]
