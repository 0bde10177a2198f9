"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas de provedores e serviços externos
"""
