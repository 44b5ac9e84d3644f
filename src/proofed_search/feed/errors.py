"""
Ошибки загрузки каталога
"""


class CatalogError(Exception):
    """Базовая ошибка каталога (восстановимая: индекс строится пустым)"""
    pass


class CatalogNotFoundError(CatalogError):
    """Файл каталога не найден или не читается"""
    pass


class CatalogParseError(CatalogError):
    """Ошибка парсинга каталога"""
    pass


class CatalogDownloadError(CatalogError):
    """Ошибка загрузки каталога по URL"""
    pass


class CatalogTooLargeError(CatalogError):
    """Каталог слишком большой"""
    pass
