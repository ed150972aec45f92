"""
Cor estável por código de proposição (legenda do gráfico semanal).

REGRA: Este módulo NÃO pode importar streamlit.
"""


def _unidades_utf16(texto: str):
    dados = texto.encode("utf-16-le")
    for i in range(0, len(dados), 2):
        yield dados[i] | (dados[i + 1] << 8)


def hash_codigo(codigo: str) -> int:
    """
    Hash 32 bits com sinal: h = c + ((h << 5) - h) por unidade UTF-16.

    Mesmo resultado do `charCodeAt` do navegador, inclusive para emoji
    (pares substitutos).
    """
    h = 0
    for unidade in _unidades_utf16(codigo or ""):
        h = (unidade + (h << 5) - h) & 0xFFFFFFFF
    return h - 0x100000000 if h & 0x80000000 else h


def cor_proposicao(codigo: str) -> str:
    """
    Cor '#rrggbb' determinística para um código.

    Bytes 0, 1 e 2 (menos significativo primeiro) do hash.
    Ex: 'PL 123/2023' -> '#606899'
    """
    h = hash_codigo(codigo)
    return "#" + "".join(f"{(h >> (8 * i)) & 0xFF:02x}" for i in range(3))
