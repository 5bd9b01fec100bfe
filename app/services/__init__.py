# Services package init
"""
Boruto Api — Services Layer
===========================

What:  Logic sitting between routes (HTTP) and the static catalog.

Service Inventory:
    - HeroRepository: Page resolution with prev/next links and name search
"""
