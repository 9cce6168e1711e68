"""
utils - Логирование, ошибки, мониторинг.
"""
