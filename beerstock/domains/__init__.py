# beerstock/domains/__init__.py
