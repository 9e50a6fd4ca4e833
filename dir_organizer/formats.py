"""
Built-in extension table.

Maps each category (the destination folder name) to the extensions it
collects. Extensions are stored upper-case without a leading dot. The
first category listing an extension wins, so order matters.
"""

from typing import Dict, List

FormatTable = Dict[str, List[str]]

DEFAULT_CATEGORY = "Miscellaneous"

DEFAULT_FORMATS: FormatTable = {
    "Images": [
        "JPG",
        "JPEG",
        "PNG",
        "GIF",
        "BMP",
        "TIF",
        "TIFF",
        "WEBP",
        "HEIC",
        "HEIF",
        "SVG",
        "ICO",
        "PSD",
        "RAW",
        "CR2",
        "NEF",
        "ARW",
        "DNG",
    ],
    "Music": ["MP3", "WAV", "FLAC", "AAC", "OGG", "WMA", "M4A", "AIFF", "MID", "MIDI"],
    "Videos": [
        "MP4",
        "MOV",
        "AVI",
        "MKV",
        "WMV",
        "FLV",
        "WEBM",
        "M4V",
        "MPG",
        "MPEG",
        "3GP",
    ],
    "Documents": [
        "PDF",
        "DOC",
        "DOCX",
        "ODT",
        "RTF",
        "TXT",
        "MD",
        "TEX",
        "EPUB",
        "PAGES",
    ],
    "Spreadsheets": ["XLS", "XLSX", "ODS", "CSV", "TSV", "NUMBERS"],
    "Presentations": ["PPT", "PPTX", "ODP", "KEY"],
    "Archives": ["ZIP", "RAR", "7Z", "TAR", "GZ", "BZ2", "XZ", "TGZ", "ISO"],
    "Code": [
        "PY",
        "JS",
        "TS",
        "JAVA",
        "C",
        "CPP",
        "H",
        "CS",
        "GO",
        "RS",
        "RB",
        "PHP",
        "SH",
        "HTML",
        "CSS",
        "JSON",
        "XML",
        "YML",
        "YAML",
    ],
    "Executables": ["EXE", "MSI", "DMG", "PKG", "DEB", "RPM", "APK", "APP", "BAT"],
    "Fonts": ["TTF", "OTF", "WOFF", "WOFF2", "EOT"],
}
