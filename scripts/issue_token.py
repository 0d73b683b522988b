#!/usr/bin/env python3
# =============================================================================
# scripts/issue_token.py - Development Bearer Token
# =============================================================================
# Prints a signed JWT accepted by the Users API, using the issuer, audience
# and signing key from the environment / .env file.
#
# Usage:
#   python scripts/issue_token.py --subject dev-user
#   python scripts/issue_token.py --subject dev-user --email dev@example.com --minutes 5
#
#   TOKEN=$(python scripts/issue_token.py)
#   curl -H "Authorization: Bearer $TOKEN" http://localhost:5000/api/users
# =============================================================================

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.auth.tokens import issue_token
from app.config import get_settings


def main():
    """Mint a development token and print it to stdout."""
    parser = argparse.ArgumentParser(description="Issue a development bearer token")
    parser.add_argument("--subject", default="dev-user", help="Value of the 'sub' claim")
    parser.add_argument("--email", default=None, help="Optional 'email' claim")
    parser.add_argument("--minutes", type=int, default=None, help="Token lifetime in minutes")
    args = parser.parse_args()

    settings = get_settings()
    print(issue_token(settings, args.subject, email=args.email, expires_minutes=args.minutes))


if __name__ == "__main__":
    main()
