"""
Constants shared by the variant rule table.

Option sets, size limits and regex patterns live here so the rule
builders stay declarative.
"""

import re

# Options offered by the Combobox widget
LANGUAGES = [
    {"label": "English", "value": "en"},
    {"label": "French", "value": "fr"},
    {"label": "German", "value": "de"},
    {"label": "Spanish", "value": "es"},
    {"label": "Portuguese", "value": "pt"},
    {"label": "Russian", "value": "ru"},
    {"label": "Japanese", "value": "ja"},
    {"label": "Korean", "value": "ko"},
    {"label": "Chinese", "value": "zh"},
]
LANGUAGE_CODES = frozenset(lang["value"] for lang in LANGUAGES)

# File Input dropzone limits
MAX_FILES = 5
MAX_FILE_SIZE = 4 * 1024 * 1024  # 4MB

# Slider fallbacks
SLIDER_DEFAULT_MIN = 0
SLIDER_DEFAULT_MAX = 100
SLIDER_DEFAULT_STEP = 1

OTP_LENGTH = 6
PASSWORD_MIN_LENGTH = 8
MULTI_SELECT_MAX = 10
TAGS_MAX = 20
TAG_MAX_LENGTH = 50
TEXTAREA_MAX_LENGTH = 1000

SIGNATURE_PREFIX = "data:image/"

# ASCII-only so \d does not accept other Unicode digits
DIGITS_ONLY = re.compile(r"\A[0-9]+\Z")
PHONE_NUMBER = re.compile(r"\A\+?[1-9][0-9]{1,14}\Z")
HAS_UPPERCASE = re.compile(r"[A-Z]")
HAS_LOWERCASE = re.compile(r"[a-z]")
HAS_DIGIT = re.compile(r"[0-9]")
HAS_SPECIAL = re.compile(r"[^A-Za-z0-9]")

# Widget names handed to the renderer, keyed by variant tag
VARIANT_WIDGETS = {
    "Checkbox": "checkbox",
    "Combobox": "combobox",
    "Date Picker": "date",
    "Datetime Picker": "datetime",
    "File Input": "file",
    "Input": "text",
    "Input OTP": "otp",
    "Location Input": "location",
    "Multi Select": "multiselect",
    "Password": "password",
    "Phone": "tel",
    "Select": "select",
    "Signature Input": "signature",
    "Slider": "range",
    "Smart Datetime Input": "smart-datetime",
    "Switch": "switch",
    "Tags Input": "tags",
    "Textarea": "textarea",
}
DEFAULT_WIDGET = "text"

# Strings pydantic would otherwise read as epoch timestamps
NUMERIC_STRING = re.compile(r"[+-]?[0-9]+(\.[0-9]*)?")
