"""Renderer for converting case, project and library records to prompt text."""

from decimal import ROUND_HALF_UP, Decimal

from jrclaw_ai.domain.prompts.base_configs import get_document_type_instructions
from jrclaw_ai.domain.prompts.schemas.v1.prompt_schema import (
    CaseContext,
    KnowledgeEntry,
    Length,
    ProjectContext,
    PromptConfig,
    Tone,
)
from jrclaw_ai.settings import settings

TONE_GUIDANCE: dict[Tone, str] = {
    Tone.COMBATIVE: "Tom combativo: linguagem firme, vícios graves, urgência. Respeito formal mas incisividade.",
    Tone.CONCILIATORY: "Tom conciliatório: soluções consensuais, convergência, alternativas. Cooperação.",
    Tone.DIDACTIC: "Tom didático: conceitos claros, exemplos, acessibilidade a não-advogados.",
}

LENGTH_GUIDANCE: dict[Length, str] = {
    Length.CONCISE: "Conciso (1-3 páginas): direto, argumentos essenciais.",
    Length.EXHAUSTIVE: "Exaustivo (15+ páginas): profundidade máxima, doutrina, todas as correntes.",
}

_CENTS = Decimal("0.01")


def format_brl(value: float | int | Decimal) -> str:
    """Format a value as Brazilian reais, e.g. 1200000 -> "R$ 1.200.000,00".

    The pt-BR pattern is applied directly so the result never depends on
    the host locale.
    """
    amount = Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(amount):,.2f}"  # 1,200,000.00
    grouped = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}R$ {grouped}"


def render_case(case: CaseContext) -> str:
    """Render the linked case section."""
    lines = ["\n## DADOS DO PROCESSO VINCULADO\n"]

    if case.case_number:
        lines.append(f"- **Número:** {case.case_number}")
    if case.case_type:
        lines.append(f"- **Tipo:** {case.case_type}")
    if case.status:
        lines.append(f"- **Status:** {case.status}")
    if case.procedural_phase:
        lines.append(f"- **Fase processual:** {case.procedural_phase}")
    if case.court_division:
        lines.append(f"- **Vara:** {case.court_division}")
    if case.district:
        lines.append(f"- **Comarca:** {case.district}")
    if case.court:
        lines.append(f"- **Tribunal:** {case.court}")
    if case.state:
        lines.append(f"- **UF:** {case.state}")
    if case.claim_value:
        lines.append(f"- **Valor da causa:** {format_brl(case.claim_value)}")
    if case.risk_value:
        lines.append(f"- **Valor de risco:** {format_brl(case.risk_value)}")

    if case.client:
        lines.append("\n### Cliente")
        lines.append(f"- Nome: {case.client.name}")
        if case.client.tax_id:
            lines.append(f"- CPF/CNPJ: {case.client.tax_id}")

    if case.judge:
        lines.append("\n### Juiz")
        lines.append(f"- {case.judge.name}")

    if case.parties:
        lines.append("\n### Partes")
        for party in case.parties:
            lines.append(f"- {party.role}: {party.name}")

    if case.creditors:
        lines.append("\n### Quadro de Credores")
        for creditor in case.creditors:
            value = f" — {format_brl(creditor.updated_value)}" if creditor.updated_value else ""
            lines.append(f"- {creditor.name} (Classe {creditor.creditor_class}){value}")

    if case.tags:
        lines.append(f"\n- **Tags:** {', '.join(case.tags)}")

    return "\n".join(lines)


def render_project(project: ProjectContext) -> str:
    """Render the linked project section."""
    lines = ["\n## DADOS DO PROJETO VINCULADO\n"]

    if project.code:
        lines.append(f"- **Código:** {project.code}")
    if project.title:
        lines.append(f"- **Título:** {project.title}")
    if project.category:
        lines.append(f"- **Categoria:** {project.category}")
    if project.status:
        lines.append(f"- **Status:** {project.status}")
    if project.description:
        lines.append(f"- **Descrição:** {project.description}")
    if project.involved_value:
        lines.append(f"- **Valor envolvido:** {format_brl(project.involved_value)}")
    if project.client_name:
        lines.append(f"- **Cliente:** {project.client_name}")

    if project.documents:
        lines.append("\n### Documentos vinculados")
        for document in project.documents:
            lines.append(f"- {document.title} ({document.document_type})")

    return "\n".join(lines)


def render_knowledge_entries(entries: list[KnowledgeEntry]) -> str:
    """Render library entries as a numbered reference list, in the given order."""
    excerpt_chars = settings.knowledge_excerpt_chars
    parts = [
        "\n## BASE DE CONHECIMENTO DO ESCRITÓRIO\n"
        "Referências curadas — considerar na elaboração:\n\n"
    ]

    for number, entry in enumerate(entries, start=1):
        area = f", {entry.area}" if entry.area else ""
        parts.append(f"[{number}] {entry.title} ({entry.entry_type}{area})\n")
        if entry.summary:
            parts.append(f"Resumo: {entry.summary}\n")
        if entry.content:
            parts.append(f"Conteúdo: {entry.content[:excerpt_chars]}...\n")
        if entry.source:
            parts.append(f"Fonte: {entry.source}\n")
        parts.append("\n")

    return "".join(parts)


def render_user_config(config: PromptConfig) -> str:
    """Render the requester's tone, length and audience choices."""
    lines = [
        "\n## CONFIGURAÇÕES",
        f"- Tom: {config.tone}",
        f"- Extensão: {config.length}",
        f"- Destinatário: {config.audience}",
        f"- Jurisprudência: {'Sim' if config.include_case_law else 'Não'}",
        f"- Doutrina: {'Sim' if config.include_doctrine else 'Não'}",
    ]
    text = "\n".join(lines) + "\n"

    tone = Tone.resolve(config.tone)
    if tone in TONE_GUIDANCE:
        text += f"\n{TONE_GUIDANCE[tone]}"

    length = Length.resolve(config.length)
    if length in LENGTH_GUIDANCE:
        text += f"\n{LENGTH_GUIDANCE[length]}"

    return text


def render_type_instructions(document_type: str) -> str:
    """Render the Layer 3 section for a document type ("" if the type has none)."""
    instructions = get_document_type_instructions(document_type)
    if not instructions:
        return ""
    return f"## INSTRUÇÕES ESPECÍFICAS: {document_type}\n\n{instructions}"


def render_user_instructions(user_instructions: str) -> str:
    """Render the requester's free-text instructions."""
    if not user_instructions:
        return ""
    return f"\n## INSTRUÇÕES DO ADVOGADO PARA ESTA PEÇA\n\n{user_instructions}"


def render_section(section_key: str, config: PromptConfig) -> str | None:
    """Render a request-specific section of a document prompt.

    Args:
        section_key: The section to render
        config: The document request

    Returns:
        Rendered text for the section, or None if empty/not applicable
    """
    renderers = {
        "type_instructions": lambda: render_type_instructions(config.document_type),
        "case": lambda: render_case(config.case) if config.case else "",
        "project": lambda: render_project(config.project) if config.project else "",
        "knowledge_base": lambda: (
            render_knowledge_entries(config.knowledge_entries) if config.knowledge_entries else ""
        ),
        "user_config": lambda: render_user_config(config),
        "user_instructions": lambda: render_user_instructions(config.user_instructions),
    }

    renderer = renderers.get(section_key)
    if renderer:
        result = renderer()
        return result if result else None
    return None
