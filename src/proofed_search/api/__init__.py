"""
API модуль - HTTP интерфейс поиска продуктов
"""
