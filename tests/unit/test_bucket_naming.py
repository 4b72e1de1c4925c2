import pytest

from learning_cdk_stack import bucket_naming


def test_digest_suffix_is_lowercase_hex_md5():
    assert bucket_naming.digest_suffix("learning-bucket") == "c518d6b29ae8835e70c5573e0073f8fe"


def test_bucket_name():
    assert bucket_naming.bucket_name() == "learning-bucket-c518d6b29ae8835e70c5573e0073f8fe"
    assert bucket_naming.bucket_name() == bucket_naming.bucket_name()


def test_content_addressed_name_differs_per_label():
    first = bucket_naming.content_addressed_name("first")
    second = bucket_naming.content_addressed_name("second")
    assert first.startswith("first-")
    assert second.startswith("second-")
    assert first[len("first-"):] != second[len("second-"):]


def test_empty_label_rejected():
    with pytest.raises(ValueError):
        bucket_naming.content_addressed_name("")


def test_digest_not_flagged_for_security(monkeypatch):
    md5 = bucket_naming.hashlib.md5
    calls = []

    def fips_md5(data, **kwargs):
        if kwargs.get("usedforsecurity", True):
            raise ValueError("md5 is disabled for security use")
        calls.append(kwargs)
        return md5(data, **kwargs)

    monkeypatch.setattr(bucket_naming.hashlib, "md5", fips_md5)
    assert bucket_naming.bucket_name() == "learning-bucket-c518d6b29ae8835e70c5573e0073f8fe"
    assert calls == [{"usedforsecurity": False}]
