import pytest

RED = {'r': 1, 'g': 0, 'b': 0, 'a': 1}
BLUE = {'r': 0, 'g': 0, 'b': 1, 'a': 1}
BLACK_25 = {'r': 0, 'g': 0, 'b': 0, 'a': 0.25}


def make_node(**overrides):
    node = {'id': '1:1', 'name': 'Node', 'type': 'RECTANGLE'}
    node.update(overrides)
    return node


def make_text(characters='Hello', font_size=None, **overrides):
    style = {'fontFamily': 'Inter'}
    if font_size is not None:
        style['fontSize'] = font_size
    return make_node(type='TEXT', name='Label', characters=characters, style=style, **overrides)


class FakeResponse:

    def __init__(self, status_code=200, payload=None, text='', headers=None):
        self.status_code = status_code
        self.payload = payload if payload is not None else {}
        self.text = text
        self.headers = headers or {}

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        return self.payload


@pytest.fixture
def no_sleep(monkeypatch):
    from figma_to_html import api

    sleeps = []
    monkeypatch.setattr(api.time, 'sleep', sleeps.append)
    return sleeps
