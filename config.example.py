# config.example.py

"""
Documentation-only module (safe to commit).

Configuration is read from environment variables, optionally through a local
.env file in the current directory. Real environment variables take precedence
over .env entries.
"""

ENV_VARS = {
    # Records
    "WORKING_TIME_RECORD": (
        "Record file used when no -f/--file is given "
        "(default: ~/working_time_record.txt). Empty means unset."
    ),
    # Logging
    "WORKING_TIME_RECORD_LOG_LEVEL": "Console log level on stderr (default: WARNING).",
    "WORKING_TIME_RECORD_LOG_FILE": "Optional diagnostic log file (DEBUG and above).",
}

EXAMPLE_DOTENV = """\
WORKING_TIME_RECORD=~/Documents/working_time_record.txt
WORKING_TIME_RECORD_LOG_LEVEL=INFO
"""
