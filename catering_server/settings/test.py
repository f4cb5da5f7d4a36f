"""
Test settings for catering_server project.
"""

from .base import *

# Pin the business configuration so tests do not depend on the environment
TIME_ZONE = 'Europe/Prague'
CAPACITY_LOAD_WARNING_PERCENT = 80
CURRENCY_LABEL = 'Kč'

# Disable logging during tests
LOGGING_CONFIG = None
