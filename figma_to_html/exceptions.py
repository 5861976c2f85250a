class FigmaError(Exception):
    pass


class FigmaConfigError(FigmaError, ValueError):
    pass


class FigmaAPIError(FigmaError):

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f'Figma API error: {status_code} - {body}')


class InvalidFigmaUrlError(FigmaError, ValueError):
    pass


class NodeNotFoundError(FigmaError):
    pass


class DesignTooDeepError(FigmaError):

    def __init__(self, depth: int, limit: int):
        self.depth = depth
        self.limit = limit
        super().__init__(f'Design tree depth {depth} exceeds the limit of {limit}')
