"""
Infraestrutura: configuração e logging.
"""
