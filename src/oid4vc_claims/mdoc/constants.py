# -*- encoding: utf-8 -*-
"""
Field names and well-known identifiers for mdoc credentials.
"""

# Credential request / issuable credential fields
FORMAT = "format"
DOCTYPE = "doctype"
CLAIMS = "claims"

# Credential format
MSO_MDOC = "mso_mdoc"

# ISO/IEC 18013-5 mobile driving licence
MDL_DOCTYPE = "org.iso.18013.5.1.mDL"
MDL_NAMESPACE = "org.iso.18013.5.1"

# Date claims filled in by the issuer
ISSUE_DATE = "issue_date"
EXPIRY_DATE = "expiry_date"

# OAuth error code for rejected credential requests
INVALID_CREDENTIAL_REQUEST = "invalid_credential_request"
