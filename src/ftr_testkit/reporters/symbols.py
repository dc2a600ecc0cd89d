import sys

# the fancy glyphs render as boxes in the legacy windows console
if sys.platform == "win32":
    ok = "√"
    err = "×"
else:
    ok = "✓"
    err = "✖"
