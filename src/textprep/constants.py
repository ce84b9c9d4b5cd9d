import os

from dotenv import load_dotenv

load_dotenv(os.getenv("ENV_FILE"), override=True)

# General
PRODUCT = os.getenv("PRODUCT", "textprep")
VERSION = os.environ.get("VERSION", "0")
ENV = os.getenv("ENV", "stg")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")

BASE_PATH = os.path.dirname(os.path.realpath(__file__))

# Cleaning pipeline defaults
DEFAULT_NORMALIZATION_FORM = os.getenv("TEXTPREP_NORMALIZATION_FORM", "NFKC")
# Validated by CleaningConfig, so a bad value fails when a config is built
DEFAULT_MAX_REPEAT = os.getenv("TEXTPREP_MAX_REPEAT", "2")
DEFAULT_NUMBER_TOKEN = os.getenv("TEXTPREP_NUMBER_TOKEN", "<num>")

# File I/O
DEFAULT_ENCODING = os.getenv("TEXTPREP_ENCODING", "utf-8")
DEFAULT_ENCODING_ERRORS = os.getenv("TEXTPREP_ENCODING_ERRORS", "strict")
