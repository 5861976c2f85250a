import re

MAX_CLASS_NAME_LENGTH = 50
FALLBACK_CLASS_NAME = 'element'

# Order matters: the first keyword found in the node name decides the tag.
SEMANTIC_TAGS = (
    (('nav', 'menu'), 'nav'),
    (('header',), 'header'),
    (('footer',), 'footer'),
    (('section',), 'section'),
    (('article',), 'article'),
    (('aside', 'sidebar'), 'aside'),
    (('main',), 'main'),
    (('button', 'btn'), 'button'),
    (('link',), 'a'),
    (('image', 'img', 'photo'), 'figure'),
    (('list',), 'ul'),
    (('item',), 'li'),
)


def sanitize_class_name(name: str) -> str:
    clean_name = re.sub(r'[^a-z0-9]+', '-', (name or '').lower())
    clean_name = clean_name[:MAX_CLASS_NAME_LENGTH].strip('-')
    return clean_name or FALLBACK_CLASS_NAME


def infer_semantic_tag(name: str) -> str:
    name_lower = (name or '').lower()
    for keywords, tag in SEMANTIC_TAGS:
        if any(keyword in name_lower for keyword in keywords):
            return tag
    return 'div'


def escape_html(text: str) -> str:
    return (text.replace('&', '&amp;')
                .replace('<', '&lt;')
                .replace('>', '&gt;')
                .replace('"', '&quot;')
                .replace("'", '&#039;'))
