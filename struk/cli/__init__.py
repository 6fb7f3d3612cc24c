"""Command-line entry points for struk.

Usage:
    struk parse receipt.txt
    struk scan receipt.jpg --ocr-url http://localhost:8001
    struk categorize --merchant "Apotek Kimia Farma"
"""
