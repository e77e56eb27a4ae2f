"""
Core: границы, формы диапазонов и предикаты.

Модуль не зависит от внешних систем: только сравнения значений.
"""
