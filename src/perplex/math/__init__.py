"""
Math modules для perplex

Операции над Perplex поверх value-типа из domain:
- numerical_safeguards: машинный epsilon, float-проверки, валидация
- polar: секторы, аргумент, klein-индекс, полярная форма
- functions: exp, ln, log, sqrt, тригонометрические функции
- powers: целые степени (exponentiation by squaring)
- matrix_form: симметричная 2×2 матричная форма (numpy)

Публичный API реэкспортируется пакетом src.perplex.
"""
