from tlsfindings.parsers.ssl_enum import LineClassifier, ScanContext, SslEnumParser

__all__ = ["LineClassifier", "ScanContext", "SslEnumParser"]
