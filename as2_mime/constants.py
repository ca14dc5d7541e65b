# ============================================================================
# as2_mime/constants.py
# ============================================================================
"""Media types, S/MIME parameters and transfer encodings used on the wire."""

EOL = "\r\n"

TYPE_PKCS7_MIME = "application/pkcs7-mime"
TYPE_X_PKCS7_MIME = "application/x-pkcs7-mime"
TYPE_PKCS7_SIGNATURE = "application/pkcs7-signature"
TYPE_X_PKCS7_SIGNATURE = "application/x-pkcs7-signature"

PKCS7_MIME_TYPES = (TYPE_PKCS7_MIME, TYPE_X_PKCS7_MIME)
PKCS7_SIGNATURE_TYPES = (TYPE_PKCS7_SIGNATURE, TYPE_X_PKCS7_SIGNATURE)

# Non-standard spelling folded into the canonical one on construction
LEGACY_PKCS7_PREFIX = "x-pkcs7-"
CANONICAL_PKCS7_PREFIX = "pkcs7-"

MULTIPART_SIGNED = "multipart/signed"
MULTIPART_REPORT = "multipart/report"

SMIME_TYPE_COMPRESSED = "compressed-data"
SMIME_TYPE_ENCRYPTED = "enveloped-data"
SMIME_TYPE_SIGNED = "signed-data"

ENCODING_7BIT = "7bit"
ENCODING_8BIT = "8bit"
ENCODING_QUOTEDPRINTABLE = "quoted-printable"
ENCODING_BASE64 = "base64"
ENCODING_BINARY = "binary"

CONTENT_TYPE = "content-type"
CONTENT_TRANSFER_ENCODING = "content-transfer-encoding"
