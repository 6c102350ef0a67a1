"""Render pipeline failures as a visible, non-fatal notice on the host page."""

_JS_REPLACEMENTS = {
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "<": "\\u003C",
    ">": "\\u003E",
    "&": "\\u0026",
    "=": "\\u003D",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

NOTICE_TEMPLATE = """<script>window.addEventListener("DOMContentLoaded", function() {
var div = document.createElement("div")
div.style.background = "rgb(220 38 38)"
div.style.color = "rgb(254 226 226)"
div.style.padding = "1rem"
div.style.margin = "1rem"
div.style.borderRadius = "8px"
div.style.fontFamily = "system-ui, -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, 'Open Sans', 'Helvetica Neue', sans-serif"
div.style.fontSize = "1rem"
var span = document.createElement("span")
span.style.fontSize = ".875rem"
span.style.textTransform = "uppercase"
span.style.fontWeight = "700"
span.style.marginRight = ".5rem"
span.append("Error:")
div.append(span)
div.append("%s")
document.body.prepend(div)
})
</script>
"""


def _unicode_escape(ch: str) -> str:
    code = ord(ch)
    if code > 0xFFFF:
        # JavaScript string escapes hold one UTF-16 code unit.
        code -= 0x10000
        return "\\u%04X\\u%04X" % (0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF))
    return "\\u%04X" % code


def js_escape(text: str) -> str:
    """Escape `text` for use inside a quoted JavaScript string in an HTML script block."""
    out = []
    for ch in text:
        replacement = _JS_REPLACEMENTS.get(ch)
        if replacement is not None:
            out.append(replacement)
        elif not ch.isprintable():
            out.append(_unicode_escape(ch))
        else:
            out.append(ch)
    return "".join(out)


def render_notice(message: str) -> str:
    return NOTICE_TEMPLATE % js_escape(message)


class ErrorPresenter:
    """Single place where a pipeline error becomes renderable markup.

    Logging is left to the caller, which knows whether a traceback is wanted.
    """

    def present(self, error: Exception) -> str:
        return render_notice(str(error))
