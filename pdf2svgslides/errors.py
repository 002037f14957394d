"""
변환 중 발생하는 예외 정의

ConversionError 하위 예외는 CLI에서 잡아서 종료코드 1로 처리한다.
InvalidDimension / SurfaceError / EncodeError 는 저수준 예외이고,
convert 단계에서 PageError 로 감싸서(페이지 번호 + 작업명) 올린다.
"""


class ConversionError(Exception):
    pass


class DocumentError(ConversionError):
    pass


class PageSelectionError(ConversionError):
    pass


class PageError(ConversionError):
    def __init__(self, page: int, operation: str, cause: BaseException):
        self.page = page
        self.operation = operation
        self.cause = cause
        super().__init__(f"error {operation} for page {page}: {cause}")


class InvalidDimension(ValueError):
    pass


class SurfaceError(RuntimeError):
    pass


class EncodeError(RuntimeError):
    pass
