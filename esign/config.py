"""
Environment configuration module
Loads eSignature API settings and demo defaults from the environment.
"""

import os
from dotenv import load_dotenv

# Load .env file (for local development)
load_dotenv()

# API settings (required for sending)
DS_ACCESS_TOKEN = os.getenv('DS_ACCESS_TOKEN')
DS_ACCOUNT_ID = os.getenv('DS_ACCOUNT_ID')

# Optional environment variables (with defaults)
DS_BASE_PATH = os.getenv('DS_BASE_PATH', 'https://demo.docusign.net/restapi')
DS_HTTP_TIMEOUT = int(os.getenv('DS_HTTP_TIMEOUT', '30'))

# Documents 2 and 3 of the demo envelope
DOC_DOCX_PATH = os.getenv('DOC_DOCX_PATH', 'demo_documents/World_Wide_Corp_Battle_Plan_Trafalgar.docx')
DOC_DOCX_NAME = os.getenv('DOC_DOCX_NAME', 'Battle Plan')
DOC_PDF_PATH = os.getenv('DOC_PDF_PATH', 'demo_documents/World_Wide_Corp_lorem.pdf')
DOC_PDF_NAME = os.getenv('DOC_PDF_NAME', 'Lorem Ipsum')

# Default recipients (optional, CLI flags override)
SIGNER_EMAIL = os.getenv('SIGNER_EMAIL', '')
SIGNER_NAME = os.getenv('SIGNER_NAME', '')
CC_EMAIL = os.getenv('CC_EMAIL', '')
CC_NAME = os.getenv('CC_NAME', '')
ENVELOPE_STATUS = os.getenv('ENVELOPE_STATUS', 'sent')

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


def require_api_settings() -> None:
    """Raise ValueError if the settings needed to call the API are missing."""
    required_vars = {
        'DS_ACCESS_TOKEN': DS_ACCESS_TOKEN,
        'DS_ACCOUNT_ID': DS_ACCOUNT_ID,
        'DS_BASE_PATH': DS_BASE_PATH,
    }

    missing_vars = [var_name for var_name, var_value in required_vars.items() if not var_value]

    if missing_vars:
        raise ValueError(f"Missing required environment variables: {', '.join(missing_vars)}")
