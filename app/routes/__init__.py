# Routes package init
"""
Boruto Api — API Routes Package
===============================

Route Inventory:
    - root.py:    GET /                          (welcome text)
    - heroes.py:  GET /boruto/heroes             (one catalog page)
                  GET /boruto/heroes/search      (name search over the catalog)
    - health.py:  GET /health                    (service health check)

Routes stay thin: they read query parameters, call HeroRepository and hand
back its envelope. Error responses come from the global exception handlers.
"""
