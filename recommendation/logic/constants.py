"""
Scoring Engine Constants

Static reference tables (stream keywords, future-course catalog, state
adjacency), enums, weights, caps and thresholds used by the scoring engine.
All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict, List, Tuple


# =============================================================================
# ENUMS
# =============================================================================

class StreamKey(str, Enum):
    """Coarse academic-discipline bucket inferred from a profile."""
    COMPUTER_SCIENCE = "Computer Science"
    MEDICAL = "Medical"
    COMMERCE = "Commerce"
    ARTS = "Arts"
    SCIENCE = "Science"
    ENGINEERING = "Engineering"


class EducationLevelKey(str, Enum):
    """Catalog key combining study level and stream."""
    TWELFTH_SCIENCE_PCM = "12th_science_pcm"
    TWELFTH_SCIENCE_PCB = "12th_science_pcb"
    TWELFTH_COMMERCE = "12th_commerce"
    TWELFTH_ARTS = "12th_arts"
    DIPLOMA_CS = "diploma_cs"
    DIPLOMA_ENGINEERING = "diploma_engineering"
    UG_CS = "ug_cs"
    UG_MEDICAL = "ug_medical"
    UG_COMMERCE = "ug_commerce"
    UG_ARTS = "ug_arts"
    UG_SCIENCE = "ug_science"


DEFAULT_STREAM = StreamKey.SCIENCE
DEFAULT_LEVEL_KEY = EducationLevelKey.TWELFTH_SCIENCE_PCM

# Fixed order of the five aptitude dimensions; also the tie-break order
# when picking a profile's top skills.
APTITUDE_DIMENSIONS: Tuple[str, ...] = ("logical", "numerical", "technical", "verbal", "creative")


# =============================================================================
# STREAM CLASSIFICATION KEYWORDS
# =============================================================================

# Matched against the space-padded, lower-cased current course text.
# Evaluation order is the order of this mapping.
CLASSIFIER_KEYWORDS: Dict[StreamKey, Tuple[str, ...]] = {
    StreamKey.COMPUTER_SCIENCE: (
        "cse", "computer", " it", "bca", "software", "data",
        "information technology", "mca",
    ),
    StreamKey.MEDICAL: (
        "pcb", "medical", "mbbs", "nursing", "pharmacy", "pharm", "biology", "bds",
    ),
    StreamKey.COMMERCE: (
        "commerce", "bba", "bcom", "b.com", "mba", " ca ", "chartered",
        "accountancy", "finance",
    ),
    StreamKey.ARTS: (
        "arts", "humanities", " ba ", "b.a.", "design", "literature",
    ),
    StreamKey.ENGINEERING: (
        "engineering", "btech", "b.tech", "mechanical", "electrical", "civil",
    ),
}

# Aptitude threshold used to route a science study area to Engineering
SCIENCE_ENGINEERING_APTITUDE_THRESHOLD = 60


# =============================================================================
# STREAM -> COLLEGE SPECIALIZATION KEYWORDS
# =============================================================================

STREAM_KEYWORDS: Dict[StreamKey, Tuple[str, ...]] = {
    StreamKey.COMPUTER_SCIENCE: (
        "Engineering & Technology", "BCA", "BCA AND BBA", "IT", "Computer",
        "Information Technology", "Software", "Data Science", "AI", "Cyber",
    ),
    StreamKey.MEDICAL: (
        "Medical-Allopathy", "Medical-Ayurveda", "BUMS", "BHMS", "BDS", "MBBS",
        "Para Medical", "Nursing", "Pharmacy", "B.Pharm", "D.Pharm", "Paramedical",
        "Nursing and Paramedical", "Medical", "Health", "Physiotherapy",
    ),
    StreamKey.COMMERCE: (
        "Commerce", "Management", "BBA", "B.Com", "MBA", "Finance", "Accounting",
        "Business", "Commerce and management", "COMMERCE SCIENCE",
    ),
    StreamKey.ARTS: (
        "Arts", "Humanities", "Social Sciences", "Fine Arts", "Visual Arts",
        "Music", "Dance", "Literature", "Social Work", "Design", "GAYAN", "BADAN",
    ),
    StreamKey.SCIENCE: (
        "Science", "Physics", "Chemistry", "Biology", "Biotechnology", "Microbiology",
        "Agriculture", "Horticulture", "Food Technology", "Fisheries",
    ),
    StreamKey.ENGINEERING: (
        "Engineering & Technology", "B.Tech", "Architecture", "Mechanical",
        "Electrical", "Civil", "Electronics", "Chemical",
    ),
}


# =============================================================================
# FUTURE COURSE CATALOG
# =============================================================================

# (display name, short code, aptitude tags)
CatalogCourse = Tuple[str, str, Tuple[str, ...]]

FUTURE_COURSE_CATALOG: Dict[EducationLevelKey, Dict[str, List]] = {
    EducationLevelKey.TWELFTH_SCIENCE_PCM: {
        "courses": [
            ("B.Tech CSE", "BTECH-CSE", ("technical", "computing", "software")),
            ("B.Tech IT", "BTECH-IT", ("technical", "computing", "information technology")),
            ("B.Tech AI/ML", "BTECH-AIML", ("technical", "computing", "data science")),
            ("B.Tech Electronics", "BTECH-ECE", ("technical", "engineering", "electronics")),
            ("BCA", "BCA", ("technical", "computing", "software")),
            ("B.Sc Physics", "BSC-PHY", ("science", "physics", "research")),
            ("B.Sc Mathematics", "BSC-MATH", ("science", "mathematics", "research")),
            ("B.Arch", "BARCH", ("creative", "design", "architecture")),
        ],
        "college_types": ["Engineering & Technology", "BCA", "Science", "Architecture"],
    },
    EducationLevelKey.TWELFTH_SCIENCE_PCB: {
        "courses": [
            ("MBBS", "MBBS", ("medical", "health", "biology")),
            ("BDS", "BDS", ("medical", "health", "dentistry")),
            ("BAMS", "BAMS", ("medical", "health", "ayurveda")),
            ("BHMS", "BHMS", ("medical", "health", "homeopathy")),
            ("B.Pharm", "BPHARM", ("medical", "pharmacy", "chemistry")),
            ("Nursing", "NURSING", ("medical", "health", "care")),
            ("BPT", "BPT", ("medical", "health", "physiotherapy")),
            ("B.Sc Nursing", "BSC-NURSING", ("medical", "health", "care")),
            ("Paramedical", "PARAMEDICAL", ("medical", "health", "diagnostics")),
        ],
        "college_types": [
            "Medical-Allopathy", "Medical-Ayurveda", "BUMS", "BHMS", "Para Medical",
            "Nursing", "Pharmacy", "Nursing and Paramedical",
        ],
    },
    EducationLevelKey.TWELFTH_COMMERCE: {
        "courses": [
            ("B.Com", "BCOM", ("business", "commerce", "accounting")),
            ("BBA", "BBA", ("business", "management")),
            ("CA Foundation", "CA-FOUNDATION", ("business", "finance", "accounting")),
            ("CS Foundation", "CS-FOUNDATION", ("business", "law", "governance")),
            ("B.Com Honours", "BCOM-HONS", ("business", "commerce", "finance")),
            ("BBA Finance", "BBA-FIN", ("business", "finance", "management")),
        ],
        "college_types": ["Commerce", "Management", "BBA", "Commerce and management"],
    },
    EducationLevelKey.TWELFTH_ARTS: {
        "courses": [
            ("BA", "BA", ("creative", "humanities", "literature")),
            ("BA Honours", "BA-HONS", ("creative", "humanities", "research")),
            ("BJMC", "BJMC", ("creative", "media", "journalism")),
            ("BSW", "BSW", ("creative", "social work", "humanities")),
            ("BFA", "BFA", ("creative", "fine arts", "design")),
            ("B.Des", "BDES", ("creative", "design")),
            ("BA LLB", "BA-LLB", ("creative", "law", "humanities")),
        ],
        "college_types": ["Arts", "Humanities", "Social Sciences", "Fine Arts", "Visual Arts", "Social Work"],
    },
    EducationLevelKey.DIPLOMA_CS: {
        "courses": [
            ("B.Tech CSE (Lateral Entry)", "BTECH-CSE-LE", ("technical", "computing", "software")),
            ("B.Tech IT (Lateral Entry)", "BTECH-IT-LE", ("technical", "computing", "information technology")),
            ("BCA", "BCA", ("technical", "computing", "software")),
            ("B.Sc CS", "BSC-CS", ("technical", "computing", "science")),
        ],
        "college_types": ["Engineering & Technology", "BCA", "IT", "Computer"],
    },
    EducationLevelKey.DIPLOMA_ENGINEERING: {
        "courses": [
            ("B.Tech (Lateral Entry)", "BTECH-LE", ("technical", "engineering")),
            ("B.E. (Lateral Entry)", "BE-LE", ("technical", "engineering")),
        ],
        "college_types": ["Engineering & Technology", "Architecture"],
    },
    EducationLevelKey.UG_CS: {
        "courses": [
            ("M.Tech CSE", "MTECH-CSE", ("technical", "computing", "research")),
            ("MCA", "MCA", ("technical", "computing", "software")),
            ("M.Sc CS", "MSC-CS", ("technical", "computing", "science")),
            ("MBA (IT)", "MBA-IT", ("business", "management", "technology")),
            ("MS (Abroad)", "MS-ABROAD", ("technical", "computing", "research")),
        ],
        "college_types": ["Engineering & Technology", "Management", "Science"],
    },
    EducationLevelKey.UG_MEDICAL: {
        "courses": [
            ("MD", "MD", ("medical", "health", "specialization")),
            ("MS", "MS-SURGERY", ("medical", "health", "surgery")),
            ("M.Sc Nursing", "MSC-NURSING", ("medical", "health", "care")),
            ("M.Pharm", "MPHARM", ("medical", "pharmacy", "research")),
            ("MPT", "MPT", ("medical", "health", "physiotherapy")),
            ("PhD", "PHD-MED", ("medical", "research")),
        ],
        "college_types": ["Medical-Allopathy", "Medical-Ayurveda", "Para Medical", "Nursing"],
    },
    EducationLevelKey.UG_COMMERCE: {
        "courses": [
            ("MBA", "MBA", ("business", "management")),
            ("M.Com", "MCOM", ("business", "commerce", "accounting")),
            ("CA Final", "CA-FINAL", ("business", "finance", "accounting")),
            ("CS Professional", "CS-PROFESSIONAL", ("business", "law", "governance")),
            ("CMA", "CMA", ("business", "finance", "cost accounting")),
        ],
        "college_types": ["Management", "Commerce"],
    },
    EducationLevelKey.UG_ARTS: {
        "courses": [
            ("MA", "MA", ("creative", "humanities", "research")),
            ("MSW", "MSW", ("creative", "social work")),
            ("MFA", "MFA", ("creative", "fine arts", "design")),
            ("M.Des", "MDES", ("creative", "design")),
            ("LLB", "LLB", ("creative", "law")),
            ("LLM", "LLM", ("creative", "law", "research")),
        ],
        "college_types": ["Arts", "Social Sciences", "Fine Arts", "Humanities"],
    },
    EducationLevelKey.UG_SCIENCE: {
        "courses": [
            ("M.Sc", "MSC", ("science", "research")),
            ("M.Tech", "MTECH", ("technical", "engineering", "research")),
            ("MBA", "MBA", ("business", "management")),
            ("PhD", "PHD", ("science", "research")),
        ],
        "college_types": ["Science", "Engineering & Technology", "Management"],
    },
}

COURSE_DESCRIPTIONS: Dict[str, str] = {
    "B.Tech CSE": "Bachelor of Technology in Computer Science - 4 year program focusing on software development and computing",
    "B.Tech IT": "Bachelor of Technology in Information Technology - 4 year program for IT professionals",
    "B.Tech AI/ML": "Specialized engineering degree in Artificial Intelligence and Machine Learning",
    "BCA": "Bachelor of Computer Applications - 3 year undergraduate program in computer science",
    "MBBS": "Bachelor of Medicine and Bachelor of Surgery - 5.5 year medical degree",
    "BDS": "Bachelor of Dental Surgery - 5 year dental degree",
    "BAMS": "Bachelor of Ayurvedic Medicine and Surgery - 5.5 year Ayurvedic medicine degree",
    "B.Pharm": "Bachelor of Pharmacy - 4 year pharmaceutical science degree",
    "Nursing": "B.Sc Nursing - 4 year nursing degree program",
    "B.Com": "Bachelor of Commerce - 3 year commerce undergraduate program",
    "BBA": "Bachelor of Business Administration - 3 year management program",
    "BA": "Bachelor of Arts - 3 year arts undergraduate program",
    "M.Tech CSE": "Master of Technology in Computer Science - 2 year postgraduate engineering",
    "MCA": "Master of Computer Applications - 2 year postgraduate program",
    "MBA": "Master of Business Administration - 2 year management postgraduate",
    "MBA (IT)": "MBA with IT specialization for tech management roles",
}

ENTRANCE_EXAMS: Dict[str, List[str]] = {
    "B.Tech CSE": ["JEE Main", "JEE Advanced", "State CETs"],
    "B.Tech IT": ["JEE Main", "JEE Advanced", "State CETs"],
    "B.Tech AI/ML": ["JEE Main", "JEE Advanced"],
    "BCA": ["IPU CET", "CUET", "University entrance"],
    "MBBS": ["NEET UG"],
    "BDS": ["NEET UG"],
    "BAMS": ["NEET UG"],
    "B.Pharm": ["GPAT", "State pharmacy exams"],
    "Nursing": ["NEET UG", "State nursing exams"],
    "B.Com": ["CUET", "DU JAT", "University entrance"],
    "BBA": ["IPMAT", "CUET", "SET"],
    "BA": ["CUET", "University entrance"],
    "M.Tech CSE": ["GATE"],
    "MCA": ["NIMCET", "TANCET", "MAH MCA CET"],
    "MBA": ["CAT", "XAT", "MAT", "GMAT"],
    "MBA (IT)": ["CAT", "XAT", "MAT"],
}

DEFAULT_ENTRANCE_EXAMS = ["University entrance exam"]


# =============================================================================
# STATE ADJACENCY
# =============================================================================

NEARBY_STATES: Dict[str, Tuple[str, ...]] = {
    "Andhra Pradesh": ("Telangana", "Karnataka", "Tamil Nadu", "Odisha", "Chhattisgarh"),
    "Arunachal Pradesh": ("Assam", "Nagaland"),
    "Assam": ("Arunachal Pradesh", "Nagaland", "Manipur", "Mizoram", "Tripura", "Meghalaya", "West Bengal"),
    "Bihar": ("Uttar Pradesh", "Jharkhand", "West Bengal"),
    "Chhattisgarh": ("Madhya Pradesh", "Maharashtra", "Odisha", "Jharkhand", "Telangana", "Andhra Pradesh"),
    "Delhi": ("Haryana", "Uttar Pradesh", "Rajasthan"),
    "Goa": ("Maharashtra", "Karnataka"),
    "Gujarat": ("Maharashtra", "Rajasthan", "Madhya Pradesh"),
    "Haryana": ("Delhi", "Punjab", "Himachal Pradesh", "Uttar Pradesh", "Rajasthan"),
    "Himachal Pradesh": ("Punjab", "Haryana", "Uttarakhand", "Jammu and Kashmir"),
    "Jharkhand": ("Bihar", "West Bengal", "Odisha", "Chhattisgarh", "Uttar Pradesh"),
    "Karnataka": ("Maharashtra", "Goa", "Kerala", "Tamil Nadu", "Andhra Pradesh", "Telangana"),
    "Kerala": ("Karnataka", "Tamil Nadu"),
    "Madhya Pradesh": ("Uttar Pradesh", "Rajasthan", "Gujarat", "Maharashtra", "Chhattisgarh"),
    "Maharashtra": ("Gujarat", "Madhya Pradesh", "Chhattisgarh", "Telangana", "Karnataka", "Goa"),
    "Manipur": ("Assam", "Nagaland", "Mizoram"),
    "Meghalaya": ("Assam",),
    "Mizoram": ("Assam", "Manipur", "Tripura"),
    "Nagaland": ("Assam", "Arunachal Pradesh", "Manipur"),
    "Odisha": ("West Bengal", "Jharkhand", "Chhattisgarh", "Andhra Pradesh"),
    "Punjab": ("Haryana", "Himachal Pradesh", "Rajasthan", "Jammu and Kashmir"),
    "Rajasthan": ("Gujarat", "Madhya Pradesh", "Uttar Pradesh", "Haryana", "Punjab"),
    "Sikkim": ("West Bengal",),
    "Tamil Nadu": ("Kerala", "Karnataka", "Andhra Pradesh", "Puducherry"),
    "Telangana": ("Maharashtra", "Chhattisgarh", "Karnataka", "Andhra Pradesh"),
    "Tripura": ("Assam", "Mizoram"),
    "Uttar Pradesh": (
        "Delhi", "Haryana", "Rajasthan", "Madhya Pradesh", "Chhattisgarh",
        "Bihar", "Jharkhand", "Uttarakhand",
    ),
    "Uttarakhand": ("Himachal Pradesh", "Uttar Pradesh"),
    "West Bengal": ("Bihar", "Jharkhand", "Odisha", "Sikkim", "Assam"),
    "Jammu and Kashmir": ("Himachal Pradesh", "Punjab", "Ladakh"),
    "Ladakh": ("Jammu and Kashmir", "Himachal Pradesh"),
    "Puducherry": ("Tamil Nadu",),
}


# =============================================================================
# DIMENSION WEIGHTS
# =============================================================================

# College scorer dimensions (must sum to 1.0)
COLLEGE_DIMENSION_WEIGHTS: Dict[str, float] = {
    "aptitude": 0.45,
    "course_interest": 0.30,
    "location": 0.15,
    "stream": 0.10,
}

# Per-stream aptitude blends (each must sum to 1.0)
STREAM_APTITUDE_BLENDS: Dict[StreamKey, Dict[str, float]] = {
    StreamKey.COMPUTER_SCIENCE: {"technical": 0.5, "numerical": 0.3, "logical": 0.2},
    StreamKey.ENGINEERING: {"technical": 0.5, "numerical": 0.3, "logical": 0.2},
    StreamKey.MEDICAL: {"logical": 0.4, "numerical": 0.3, "verbal": 0.3},
    StreamKey.COMMERCE: {"numerical": 0.4, "verbal": 0.3, "logical": 0.3},
    StreamKey.ARTS: {"creative": 0.4, "verbal": 0.4, "logical": 0.2},
}

# Unweighted mean of all five dimensions
DEFAULT_APTITUDE_BLEND: Dict[str, float] = {dim: 0.2 for dim in APTITUDE_DIMENSIONS}

# Future-course tag families, checked in order; each maps to a blend
COURSE_TAG_FAMILIES: Tuple[Tuple[str, Tuple[str, ...], StreamKey], ...] = (
    ("technical", ("technical", "engineering", "computing", "software", "technology"), StreamKey.COMPUTER_SCIENCE),
    ("medical", ("medical", "health", "pharmacy", "biology"), StreamKey.MEDICAL),
    ("business", ("business", "commerce", "finance", "management", "accounting"), StreamKey.COMMERCE),
    ("creative", ("creative", "design", "arts", "media", "humanities", "law"), StreamKey.ARTS),
)

FUTURE_COURSE_WEIGHTS: Dict[str, float] = {
    "aptitude": 0.6,
    "interest": 0.4,
}


# =============================================================================
# SUB-SCORE VALUES
# =============================================================================

INTEREST_BASE_SCORE = 30
INTEREST_MATCH_SCORE = 100

LOCATION_DISTRICT_SCORE = 100
LOCATION_STATE_SCORE = 80
LOCATION_NEARBY_SCORE = 40

STREAM_MATCH_SCORE = 100
STREAM_MISMATCH_SCORE = 20

STRONG_APTITUDE_THRESHOLD = 70
HIGH_RATING_THRESHOLD = 4.0

MAX_REASON_FRAGMENTS = 3
REASON_SEPARATOR = " • "
DEFAULT_MATCH_REASON = "General recommendation"

# Scholarships
SCHOLARSHIP_BASE_SCORE = 60
SCHOLARSHIP_LOCATION_BONUS = 20
SCHOLARSHIP_LEVEL_BONUS = 15
SCHOLARSHIP_UNCERTAIN_PENALTY = 20
NATIONAL_LOCATION_TOKENS = ("national", "all india", "india")

# Eligibility-summary keywords per academic level
ACADEMIC_LEVEL_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "ug": ("class", "b.tech", "b.e.", "undergraduate", "graduation"),
    "pg": ("postgraduate", "post-graduate", "m.tech", "master", "pg "),
    "diploma": ("diploma", "polytechnic", "iti"),
}

# Jobs
JOB_BASE_SCORE = 40
JOB_LOCATION_BONUS = 15
JOB_SKILL_THRESHOLD = 70
JOB_DEFAULT_REASON = "Recent posting in your area"

# (family, skill keywords, profile aptitude field, bonus)
JOB_SKILL_FAMILIES: Tuple[Tuple[str, Tuple[str, ...], str, int], ...] = (
    ("technical", ("technical", "programming", "software", "coding"), "technical", 30),
    ("quantitative", ("quantitative", "data analysis", "statistics", "excel"), "numerical", 25),
    ("interpersonal", ("communication", "interpersonal", "sales", "negotiation"), "interpersonal", 25),
)


# =============================================================================
# RANKING CONFIGURATION
# =============================================================================

MAX_COLLEGE_FETCH = 200
MAX_COLLEGE_RECOMMENDATIONS = 50
MAX_FUTURE_COURSE_RECOMMENDATIONS = 7
JOB_MAX_AGE_DAYS = 7

PLACEHOLDER_COURSE_NAME = "Take the Aptitude Quiz"
PLACEHOLDER_COURSE_REASON = "Take the quiz to get personalized recommendations"
