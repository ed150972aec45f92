"""
Monitor Legislativo: acompanhamento de proposições da Câmara dos Deputados.

Pacotes:
- services: acesso à API de Dados Abertos (sem Streamlit)
- utils: funções puras (datas, cores, formatação)
- agregador: visões derivadas da lista de proposições
- data_provider: processamento do lote de códigos
"""

__version__ = "1.0.0"
