"""Unit converter plugin."""

manifest = {
    "title": "Unit Converter",
    "summary": "Convert values between units of length, mass, temperature, volume and more.",
    "blueprint": "unit_converter",
    "category": "General Utilities",
}


__all__ = ["manifest"]
