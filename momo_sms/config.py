"""
Configuration for the Mobile Money SMS parser
Values come from the environment (or a .env file) with Uganda defaults
"""

import os
import logging
from typing import Optional, Union
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Config:
    # Blank values fall back to the defaults
    CURRENCY_CODE = os.getenv('MOMO_CURRENCY_CODE', '').strip().upper() or 'UGX'
    COUNTRY_CODE = os.getenv('MOMO_COUNTRY_CODE', '').strip().lstrip('+') or '256'
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()


config = Config()


def setup_logging(level: Optional[Union[int, str]] = None):
    """Configure root logging for scripts and host applications"""
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)
