"""This module derives deterministic, content-addressed resource names."""
import hashlib

BUCKET_LABEL = "learning-bucket"


def digest_suffix(label: str) -> str:
    """lowercase hex md5 of the label, used purely as a namespace suffix"""
    return hashlib.md5(label.encode("utf-8"), usedforsecurity=False).hexdigest()


def content_addressed_name(label: str) -> str:
    """append the digest of the label to the label itself"""
    if not label:
        raise ValueError("A content addressed name needs a non-empty label")
    return f"{label}-{digest_suffix(label)}"


def bucket_name() -> str:
    """the name of the learning bucket, identical on every synth"""
    return content_addressed_name(BUCKET_LABEL)
