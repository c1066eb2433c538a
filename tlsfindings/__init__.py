"""
tlsfindings
Turns nmap ssl-enum-ciphers output into a deprecated-protocol / weak-cipher report.
"""

__version__ = "0.1.0"
