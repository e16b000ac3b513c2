# Glyph ramps, ordered from lightest to darkest visual density

# Punctuation-heavy ramp
ASCII_RAMP = (" ", ".", ",", ":", ";", "+", "*", "?", "%", "S", "#", "@")

# Letters and digits only
ALPHANUMERIC_RAMP = (" ", ".", "1", "l", "t", "c", "e", "s", "u", "d", "h", "k", "m", "0", "8", "M", "W")

RAMPS = {
    "ascii": ASCII_RAMP,
    "alphanumeric": ALPHANUMERIC_RAMP,
}
