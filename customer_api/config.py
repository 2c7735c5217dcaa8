# config.py
import os
import logging.config

# Storage backend: "sql" for the database, "memory" for a throwaway in-process store
REPOSITORY_BACKEND = os.environ.get('CUSTOMER_API_REPOSITORY', 'sql')

DATABASE_URL = os.environ.get('CUSTOMER_API_DATABASE_URL', 'sqlite:///customers.db')
SQL_ECHO = os.environ.get('CUSTOMER_API_SQL_ECHO', 'False') == 'True'

HOST = os.environ.get('CUSTOMER_API_HOST', '127.0.0.1')
PORT = int(os.environ.get('CUSTOMER_API_PORT', '8000'))

LOG_LEVEL = os.environ.get('CUSTOMER_API_LOG_LEVEL', 'INFO')


# --- LOGGING CONFIGURATION ---
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {asctime} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'customer_api': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}


def configure_logging():
    logging.config.dictConfig(LOGGING)
