"""Example showing how to authorize requests and sign a blob."""

import base64
import sys

from svcauth import create_service_account_credentials_from_file_path


def main(key_path: str):
    """Load a keyfile, print an authorization header and a blob signature."""
    # JSON or .p12, picked by extension
    with create_service_account_credentials_from_file_path(
        key_path,
        scopes=["https://www.googleapis.com/auth/devstorage.read_only"],
    ) as credentials:
        print(f"🔑 Service account: {credentials.account_email}")

        # Cached until it expires; later calls make no network requests
        header = credentials.authorization_header()
        print(f"✅ Header ready ({len(header)} chars)")

        blob = "GET\n\n\n1388534400\n/bucket/objectname"
        signature = credentials.sign_blob(None, blob)
        print(f"✍️  Signature: {base64.b64encode(signature).decode()}")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "service-account.json")
