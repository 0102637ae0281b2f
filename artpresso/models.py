import enum


# --- Enums (closed vocabularies accepted by the pricing engine) ---

class Currency(str, enum.Enum):
    USD = "USD"
    CAD = "CAD"


class Unit(str, enum.Enum):
    INCHES = "inches"
    CM = "cm"


class CareerStage(str, enum.Enum):
    ASPIRING = "aspiring"
    EMERGING = "emerging"
    ESTABLISHED = "established"
    ECHELON = "echelon"


class Education(str, enum.Enum):
    SELF_TAUGHT = "self-taught"
    EMERGING_TRAINING = "emerging-training"
    COLLEGE_GRADUATE = "college-graduate"
    APPRENTICESHIP = "apprenticeship"
    INTERDISCIPLINARY = "interdisciplinary"
    BFA = "bfa"
    MFA = "mfa"
    ACADEMIC = "academic"
    PROFESSIONAL_PRACTICE = "professional-practice"


class SalesRange(str, enum.Enum):
    UNDER_1K = "under-1k"
    FROM_1K_TO_5K = "1k-5k"
    FROM_5K_TO_20K = "5k-20k"
    OVER_20K = "over-20k"


class Medium(str, enum.Enum):
    OIL = "oil"
    ACRYLIC = "acrylic"
    WATERCOLOR = "watercolor"
    DRAWING = "drawing"
    PHOTOGRAPHY = "photography"
    DIGITAL = "digital"
    MIXED_MEDIA = "mixed-media"
    SCULPTURE = "sculpture"


# --- Display labels (form options, screen quote, PDF) ---

CAREER_STAGE_LABELS = {
    CareerStage.ASPIRING: "Aspiring",
    CareerStage.EMERGING: "Emerging",
    CareerStage.ESTABLISHED: "Established",
    CareerStage.ECHELON: "Echelon",
}

EDUCATION_LABELS = {
    Education.SELF_TAUGHT: "Self-Taught",
    Education.EMERGING_TRAINING: "Emerging (Some Training)",
    Education.COLLEGE_GRADUATE: "College / Art School Graduate",
    Education.APPRENTICESHIP: "Apprenticeship / Guild Trained",
    Education.INTERDISCIPLINARY: "Interdisciplinary / Cross-Trained",
    Education.BFA: "BFA (Bachelor of Fine Arts)",
    Education.MFA: "MFA (Master of Fine Arts)",
    Education.ACADEMIC: "Academic / Instructor",
    Education.PROFESSIONAL_PRACTICE: "Professional Practice",
}

SALES_RANGE_LABELS = {
    SalesRange.UNDER_1K: "Under $1,000/year",
    SalesRange.FROM_1K_TO_5K: "$1,000 - $5,000/year",
    SalesRange.FROM_5K_TO_20K: "$5,000 - $20,000/year",
    SalesRange.OVER_20K: "Over $20,000/year",
}

MEDIUM_LABELS = {
    Medium.OIL: "Oil",
    Medium.ACRYLIC: "Acrylic",
    Medium.WATERCOLOR: "Watercolor",
    Medium.DRAWING: "Drawing",
    Medium.PHOTOGRAPHY: "Photography (unique)",
    Medium.DIGITAL: "Digital Original",
    Medium.MIXED_MEDIA: "Mixed Media",
    Medium.SCULPTURE: "Sculpture",
}

UNIT_LABELS = {
    Unit.INCHES: "inches",
    Unit.CM: "cm",
}
