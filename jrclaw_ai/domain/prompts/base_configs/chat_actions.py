"""One-click chat actions offered next to the legal chat."""

from types import MappingProxyType
from typing import Mapping

CHAT_ACTIONS: Mapping[str, str] = MappingProxyType({
    "RESUMIR_PROCESSO": (
        "[AÇÃO: RESUMIR PROCESSO] Elabore resumo executivo: (1) Identificação, (2) Objeto, "
        "(3) Cronologia, (4) Fase atual, (5) Argumentos centrais, (6) Riscos, "
        "(7) Próximos passos com prazos."
    ),
    "ANALISAR_DECISAO": (
        "[AÇÃO: ANALISAR DECISÃO] Analise: (1) Dispositivo, (2) Fundamentação, "
        "(3) Pontos de ataque (omissão, contradição, error in judicando/procedendo), "
        "(4) Recursos cabíveis com prazo, (5) Probabilidade de reforma, (6) Estratégia recomendada."
    ),
    "GERAR_CRONOLOGIA": (
        "[AÇÃO: GERAR CRONOLOGIA] Timeline: DATA | EVENTO | RELEVÂNCIA JURÍDICA | FONTE. "
        "Destacar marcos processuais."
    ),
    "ANALISAR_CONTRATO": (
        "[AÇÃO: ANALISAR CONTRATO] Extrair: (1) Partes, (2) Objeto, (3) Prazo, (4) Valor, "
        "(5) Garantias, (6) Rescisão, (7) Foro, (8) Riscos, (9) Recomendações, (10) Conformidade."
    ),
    "CALCULAR_CREDITO": (
        "[AÇÃO: CALCULAR CRÉDITO] Memória de cálculo: principal, correção, juros, multa, "
        "data-base. Classificação art. 41 LRF."
    ),
})


def get_chat_action(action_key: str) -> str | None:
    """Get the prompt for a chat action, or None for an unknown key."""
    return CHAT_ACTIONS.get(action_key)
