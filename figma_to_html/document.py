import re
from typing import Optional

from .models import ConversionResult
from .naming import escape_html


def build_html_document(body_content: str, css: Optional[str] = None,
                        title: str = 'Figma Design Export') -> str:
    if css is None:
        style = '    <link rel="stylesheet" href="styles.css">'
    else:
        style = f'    <style>\n{css}\n    </style>'

    return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape_html(title)}</title>
{style}
</head>
<body>
{body_content}</body>
</html>'''


def build_embedded_snippet(result: ConversionResult, source_name: str) -> str:
    source_name = re.sub(r'-(?=-)', '- ', source_name)
    return f'''<!-- Imported from Figma: {source_name} -->
<style>
{result.css}
</style>
{result.html}'''.strip()
