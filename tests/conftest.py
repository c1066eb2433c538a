"""Pytest configuration for tlsfindings."""
import os

import pytest

from tlsfindings.base.config import set_config

SAMPLE_SCAN = """\
Starting Nmap 7.94 ( https://nmap.org ) at 2026-01-01 10:00 UTC
Nmap scan report for www.example.com (10.0.0.5)
Host is up (0.010s latency).

PORT     STATE SERVICE
443/tcp  open  https
| ssl-enum-ciphers:
|   TLSv1.0:
|     ciphers:
|       TLS_RSA_WITH_RC4_128_SHA (rsa 2048) - C
|       TLS_RSA_WITH_AES_128_CBC_SHA (rsa 2048) - A
|     compressors:
|       NULL
|     cipher preference: server
|   TLSv1.2:
|     ciphers:
|       TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256 (secp256r1) - A
|       TLS_RSA_WITH_RC4_128_SHA (rsa 2048) - C
|     compressors:
|       NULL
|_  least strength: C
8443/tcp open  https-alt
| ssl-enum-ciphers:
|   TLSv1.1:
|     ciphers:
|       TLS_RSA_WITH_3DES_EDE_CBC_SHA (rsa 2048) - C
|       TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256 (secp256r1) - experimental
|     compressors:
|       NULL
|_  least strength: C

Nmap scan report for 10.0.0.7
Host is up.
PORT    STATE SERVICE
443/tcp open  https
| ssl-enum-ciphers:
|   TLSv1.0:
|     ciphers:
|       TLS_RSA_WITH_AES_256_CBC_SHA (rsa 2048) - A
|     compressors:
|       NULL
|   TLSv1.1:
|     ciphers:
|       TLS_RSA_WITH_AES_256_CBC_SHA (rsa 2048) - A
|     compressors:
|       NULL
|_  least strength: A

Nmap done: 2 IP addresses (2 hosts up) scanned in 3.21 seconds
"""


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    # Environment must not leak into config-driven tests.
    for name in list(os.environ):
        if name.startswith("TLSFINDINGS_"):
            monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def scan_text() -> str:
    return SAMPLE_SCAN


@pytest.fixture
def scan_lines() -> list:
    return SAMPLE_SCAN.splitlines()


@pytest.fixture
def scan_file(tmp_path):
    path = tmp_path / "scan.txt"
    path.write_text(SAMPLE_SCAN, encoding="utf-8")
    return path
