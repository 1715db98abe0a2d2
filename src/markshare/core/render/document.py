"""Standalone HTML document wrapper"""


DOCUMENT_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <style>
    {css}
    </style>
</head>
<body>
{body}
</body>
</html>"""


def wrap_document(body: str, css: str) -> str:
    """Wrap a rendered body in a full document with the theme CSS inlined verbatim."""
    return DOCUMENT_TEMPLATE.format(css=css, body=body)
