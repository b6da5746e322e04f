# Configuration settings for the Hospital Dashboards demo

# API Configuration
API_TITLE = "Hospital Dashboards"
API_VERSION = "1.0.0"
HOST = "127.0.0.1"
PORT = 8000

# Logging Configuration
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Demo data
SEED_DEMO_DATA = True

# Auth surfaces shown while logged out
AUTH_SURFACES = ["login", "signup"]
DEFAULT_AUTH_SURFACE = "login"

# Role permissions mapping
ROLE_PERMISSIONS = {
    "Administrator": ["manage_users", "view_patients", "edit_patients", "export_records"],
    "Doctor": ["view_patients", "edit_patients", "export_records"],
    "Patient": [],
    "Laboratory": [],
    "Visitor": []
}

# Patient form choices
GENDERS = ["Male", "Female", "Other"]
BLOOD_TYPES = ["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"]

# Export Configuration
EXPORT_PAGE_WIDTH = 80
EXPORT_EXTENSION = ".pdf"
DATE_FORMAT = "%m/%d/%Y"
DATETIME_FORMAT = "%m/%d/%Y %I:%M %p"
