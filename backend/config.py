"""Configuration management for the code word statistics tool."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Input Configuration
SOURCE_FILE = os.getenv("WORDSTATS_SOURCE_FILE", "yourCode.txt")
SOURCE_ENCODING = os.getenv("WORDSTATS_ENCODING", "utf-8")

# Tokenizer Configuration
DELIMIT_MODE = os.getenv("WORDSTATS_DELIMIT_MODE", "camel_case")

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # "text" or "json"
