# orders_api/core/__init__.py
"""
Доменный слой: ошибки, валидация, денежные расчёты.
Не зависит от хранилища.
"""
