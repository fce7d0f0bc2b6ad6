"""
Componentes de processamento.
"""
