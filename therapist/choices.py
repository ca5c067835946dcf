# therapist/choices.py
from django.db import models


class Specialization(models.TextChoices):
    EARLY_INTERVENTION = "Early Intervention", "Early Intervention"
    ARTICULATION_PHONOLOGY = "Articulation & Phonology", "Articulation & Phonology"
    LANGUAGE_DEVELOPMENT = "Language Development", "Language Development"
    FLUENCY_STUTTERING = "Fluency/Stuttering", "Fluency/Stuttering"
    VOICE_THERAPY = "Voice Therapy", "Voice Therapy"
    FEEDING_SWALLOWING = "Feeding & Swallowing", "Feeding & Swallowing"
    AAC = "AAC", "AAC"
    COGNITIVE_COMMUNICATION = "Cognitive-Communication", "Cognitive-Communication"
    NEUROGENIC_DISORDERS = "Neurogenic Disorders", "Neurogenic Disorders"
    ACCENT_MODIFICATION = "Accent Modification", "Accent Modification"
    GENDER_AFFIRMING_VOICE = "Gender-Affirming Voice", "Gender-Affirming Voice"
    PEDIATRIC = "Pediatric", "Pediatric"
    ADULT = "Adult", "Adult"
    GERIATRIC = "Geriatric", "Geriatric"


class Credentials(models.TextChoices):
    SLP = "SLP", "Speech-Language Pathologist"
    SLPA = "SLPA", "Speech-Language Pathology Assistant"


class Language(models.TextChoices):
    ENGLISH = "en", "English"
    SPANISH = "es", "Spanish"
    FRENCH = "fr", "French"
    GERMAN = "de", "German"
    CHINESE = "zh", "Chinese"
    JAPANESE = "ja", "Japanese"
    KOREAN = "ko", "Korean"
    ARABIC = "ar", "Arabic"
    PORTUGUESE = "pt", "Portuguese"
    RUSSIAN = "ru", "Russian"
    ITALIAN = "it", "Italian"
    HINDI = "hi", "Hindi"
    DUTCH = "nl", "Dutch"
    POLISH = "pl", "Polish"
    TURKISH = "tr", "Turkish"
    VIETNAMESE = "vi", "Vietnamese"
    ASL = "asl", "American Sign Language"


class Weekday(models.TextChoices):
    MONDAY = "Monday", "Monday"
    TUESDAY = "Tuesday", "Tuesday"
    WEDNESDAY = "Wednesday", "Wednesday"
    THURSDAY = "Thursday", "Thursday"
    FRIDAY = "Friday", "Friday"
    SATURDAY = "Saturday", "Saturday"
    SUNDAY = "Sunday", "Sunday"


class AUState(models.TextChoices):
    NSW = "NSW", "New South Wales"
    VIC = "VIC", "Victoria"
    QLD = "QLD", "Queensland"
    SA = "SA", "South Australia"
    WA = "WA", "Western Australia"
    TAS = "TAS", "Tasmania"
    NT = "NT", "Northern Territory"
    ACT = "ACT", "Australian Capital Territory"


class TherapistStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    INACTIVE = "inactive", "Inactive"
    ACTIVE = "active", "Active"
    PAUSED = "paused", "Paused"
