"""Helper modules for pylinkval.

Regular-expression matching and text extraction live in `text`; hashing,
base64 and UUID helpers in `digest`.
"""
