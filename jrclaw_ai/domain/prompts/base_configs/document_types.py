"""Layer 3: instructions specific to each document type.

Lookup is by exact key. A key with no entry means the document prompt is
built without a type-specific section.
"""

from types import MappingProxyType
from typing import Mapping

_INSTRUCTIONS: dict[str, str] = {
    # Civil pleadings
    "PETICAO_INICIAL": """Elabore uma PETIÇÃO INICIAL completa conforme arts. 319-321 do CPC/2015.

Estrutura obrigatória:
1. Endereçamento (Juízo competente com fundamentação)
2. Qualificação completa das partes
3. Dos fatos (narrativa cronológica numerada)
4. Do direito (fundamentação jurídica com teses em blocos)
5. Da tutela de urgência (se aplicável — art. 300 CPC)
6. Dos pedidos (numerados, principais e subsidiários)
7. Das provas (rol especificado)
8. Do valor da causa (art. 292 CPC)
9. Encerramento

Atenção especial:
- Causa de pedir remota (fatos) e próxima (fundamento jurídico)
- Pedidos determinados e coerentes com a fundamentação
- Valor da causa compatível com o pedido principal""",

    "CONTESTACAO": """Elabore uma CONTESTAÇÃO completa conforme arts. 335-342 do CPC/2015.

Estrutura obrigatória:
1. Endereçamento
2. Qualificação do contestante
3. Tempestividade
4. Preliminares (se houver — art. 337 CPC)
5. Prejudicial de mérito (prescrição/decadência — se houver)
6. Mérito — Dos fatos (impugnação específica, art. 341 CPC)
7. Mérito — Do direito (tese defensiva)
8. Dos pedidos
9. Das provas
10. Encerramento

IMPORTANTE: Impugnar CADA fato especificamente. Fato não impugnado presume-se verdadeiro (art. 341).
Organizar a defesa do argumento mais forte ao mais fraco.""",

    "REPLICA": """Elabore uma RÉPLICA (impugnação à contestação) conforme art. 351 do CPC/2015.

Estrutura:
1. Endereçamento
2. Referência aos autos
3. Refutação das preliminares arguidas
4. Refutação das prejudiciais de mérito
5. Refutação do mérito ponto a ponto
6. Reafirmação das teses da inicial
7. Pedido de procedência
8. Encerramento

Abordar cada argumento da contestação sistematicamente.""",

    "EMBARGOS_DECLARACAO": """Elabore EMBARGOS DE DECLARAÇÃO conforme arts. 1.022-1.026 do CPC/2015.

Estrutura:
1. Endereçamento (mesmo juízo/câmara)
2. Tempestividade (5 dias)
3. Cabimento (art. 1.022)
4. Da obscuridade / contradição / omissão (especificar qual vício)
5. Do prequestionamento (se for o caso — Súmula 356/STF)
6. Pedido de acolhimento com efeitos infringentes (se aplicável)
7. Encerramento

IMPORTANTE: Delimitar com precisão o ponto omisso, obscuro ou contraditório na decisão embargada.""",

    "AGRAVO_INSTRUMENTO": """Elabore AGRAVO DE INSTRUMENTO conforme arts. 1.015-1.020 do CPC/2015.

Estrutura:
1. Endereçamento (Tribunal competente)
2. Qualificação das partes
3. Cabimento (hipótese do art. 1.015 ou taxatividade mitigada — STJ, Tema 988)
4. Tempestividade
5. Da decisão agravada (transcrição)
6. Das razões para reforma
7. Do efeito suspensivo / tutela recursal (art. 1.019, I)
8. Do pedido
9. Documentos obrigatórios (art. 1.017)

Se pedir efeito suspensivo, demonstrar: probabilidade do direito + perigo de dano irreparável.""",

    "APELACAO": """Elabore APELAÇÃO conforme arts. 1.009-1.014 do CPC/2015.

Estrutura:
1. Endereçamento
2. Qualificação
3. Tempestividade (15 dias úteis)
4. Cabimento
5. Da sentença apelada (síntese)
6. Das preliminares recursais (nulidades — se houver)
7. Das razões de mérito (error in judicando / error in procedendo)
8. Do pedido de reforma total ou parcial
9. Encerramento

Demonstrar claramente o error in judicando (erro de direito) ou error in procedendo (erro processual).
Não repetir a inicial — focar no que a sentença errou.""",

    "RECURSO_ESPECIAL": """Elabore RECURSO ESPECIAL conforme art. 105, III, da CF e arts. 1.029-1.041 do CPC/2015.

Estrutura:
1. Endereçamento (STJ, via Tribunal de origem)
2. Qualificação
3. Tempestividade
4. Cabimento constitucional (alíneas a, b ou c do art. 105, III)
5. Prequestionamento (demonstrar)
6. Da violação à lei federal (especificar dispositivos)
7. OU da divergência jurisprudencial (paradigma com cotejo analítico)
8. Do pedido de provimento
9. Encerramento

ATENÇÃO:
- Súmula 7/STJ: não reexaminar provas
- Súmula 83/STJ: jurisprudência firmada
- Demonstrar prequestionamento explícito ou ficto (embargos declaratórios)""",

    "RECURSO_EXTRAORDINARIO": """Elabore RECURSO EXTRAORDINÁRIO conforme art. 102, III, da CF e arts. 1.029-1.041 do CPC/2015.

Estrutura:
1. Endereçamento (STF, via Tribunal de origem)
2. Qualificação
3. Tempestividade
4. Cabimento constitucional
5. Repercussão geral (art. 1.035 CPC — OBRIGATÓRIO)
6. Da violação constitucional
7. Do pedido
8. Encerramento

Repercussão geral: demonstrar relevância jurídica, política, social ou econômica que transcende o interesse das partes.""",

    "CONTRARRAZOES": """Elabore CONTRARRAZÕES ao recurso conforme art. 1.010, §1º do CPC/2015.

Estrutura:
1. Endereçamento
2. Qualificação
3. Síntese do recurso adversário
4. Da inadmissibilidade (se houver — intempestividade, deserção, etc.)
5. Da improcedência do mérito recursal (refutar cada argumento)
6. Da manutenção da decisão recorrida
7. Pedido de desprovimento
8. Encerramento

Abordar e refutar cada argumento do recurso sistematicamente.""",

    "MEMORIAIS": """Elabore MEMORIAIS conforme prática forense.

Estrutura:
1. Endereçamento
2. Qualificação e referência aos autos
3. Síntese dos fatos relevantes (apurados na instrução)
4. Análise das provas produzidas (destaque depoimentos e documentos favoráveis)
5. Fundamentação jurídica (considerando as provas)
6. Pedido final
7. Encerramento

Memoriais devem ser persuasivos e focados nas provas produzidas em audiência.""",

    # Judicial recovery and bankruptcy
    "PETICAO_RJ": """Elabore PETIÇÃO DE RECUPERAÇÃO JUDICIAL conforme Lei 11.101/2005, art. 51.

Estrutura obrigatória:
1. Endereçamento (vara empresarial / cível)
2. Qualificação completa do devedor (art. 51, I)
3. Exposição das causas da crise econômico-financeira (art. 51, I)
4. Demonstração de viabilidade (art. 47 — preservação da empresa)
5. Relação dos credores (art. 51, III) com valores e classificação
6. Relação dos empregados (art. 51, IV)
7. Relação dos bens (art. 51, II)
8. Certidões e documentos obrigatórios (art. 51, V-IX)
9. Pedidos: deferimento do processamento, suspensão das ações (stay period, art. 6º)
10. Encerramento

Documentos obrigatórios: demonstrações contábeis (3 anos), relação de credores, relação de ações, extrato bancário, certidões de protesto.""",

    "PLANO_RJ": """Elabore um PLANO DE RECUPERAÇÃO JUDICIAL conforme art. 50 e seguintes da Lei 11.101/2005.

Estrutura:
1. Preâmbulo (descrição da empresa e da crise)
2. Diagnóstico econômico-financeiro
3. Meios de recuperação (art. 50 — listar meios escolhidos)
4. Tratamento por classe de credores (art. 41):
   - Classe I: Trabalhistas (limite art. 54: 1 ano, teto 150 SM)
   - Classe II: Garantia Real
   - Classe III: Quirografários
   - Classe IV: ME/EPP
5. Condições de pagamento (deságio, carência, prazo, juros, correção)
6. Cronograma de pagamentos
7. Garantias oferecidas
8. Demonstração de viabilidade econômica (projeção de fluxo de caixa)
9. Laudo econômico-financeiro
10. Governança durante a recuperação

IMPORTANTE: Respeitar limites legais — art. 54 (trabalhistas), art. 49 §3º (garantias fiduciárias), art. 83 (ordem de preferência).""",

    "HABILITACAO_CREDITO": """Elabore HABILITAÇÃO/DIVERGÊNCIA DE CRÉDITO conforme art. 7º e seguintes da Lei 11.101/2005.

Estrutura:
1. Endereçamento (ao Administrador Judicial ou ao Juízo)
2. Qualificação do credor
3. Da origem do crédito (demonstração detalhada)
4. Do valor e atualização (memória de cálculo)
5. Da classificação pretendida (art. 83)
6. Das garantias (se houver)
7. Documentos comprobatórios
8. Pedido de inclusão/retificação no QGC
9. Encerramento""",

    "IMPUGNACAO_CREDITO": """Elabore IMPUGNAÇÃO DE CRÉDITO conforme art. 8º da Lei 11.101/2005.

Estrutura:
1. Endereçamento
2. Qualificação do impugnante
3. Do crédito impugnado (identificação)
4. Dos motivos da impugnação:
   - Inexistência/irregularidade do crédito
   - Valor incorreto (memória de cálculo)
   - Classificação incorreta (art. 83)
   - Pagamento anterior
   - Prescrição
5. Das provas
6. Pedido (exclusão, retificação de valor ou reclassificação)
7. Encerramento""",

    # Enforcement and collection
    "EXECUCAO_TITULO": """Elabore PETIÇÃO INICIAL DE EXECUÇÃO DE TÍTULO EXTRAJUDICIAL conforme arts. 783-785, 798-799 do CPC/2015.

Estrutura:
1. Endereçamento
2. Qualificação das partes
3. Do título executivo (natureza, certeza, liquidez, exigibilidade)
4. Da memória de cálculo (principal + juros + correção + multa)
5. Da citação para pagamento em 3 dias (art. 829)
6. Da penhora (indicação de bens — se conhecidos)
7. Dos pedidos
8. Do valor da execução
9. Encerramento

Título executivo extrajudicial: verificar rol do art. 784 do CPC.""",

    # Advisory work
    "PARECER": """Elabore um PARECER JURÍDICO com estrutura acadêmico-profissional.

Estrutura:
1. **Identificação**: Parecer n. / Consulente / Assunto / Data
2. **Consulta**: Reprodução da pergunta/questão formulada
3. **Dos fatos**: Relato objetivo dos fatos narrados
4. **Da análise jurídica**:
   a. Enquadramento legal
   b. Análise doutrinária
   c. Análise jurisprudencial
   d. Aplicação ao caso concreto
5. **Da conclusão**: Resposta objetiva à consulta
6. **Da recomendação**: Passos práticos sugeridos
7. **Ressalva**: "Este parecer reflete a análise do subscritor à data de sua emissão..."
8. Assinatura

O parecer deve ser analítico, imparcial e fundamentado. Apresentar correntes divergentes quando existirem.""",

    "MEMORANDO": """Elabore um MEMORANDO INTERNO para o escritório.

Estrutura:
1. Cabeçalho: De / Para / Data / Ref.
2. Objetivo (1-2 frases)
3. Contexto fático
4. Análise jurídica (concisa)
5. Riscos identificados
6. Recomendações práticas
7. Próximos passos com responsáveis e prazos

Linguagem direta e objetiva. Foco em ação.""",

    # Contracts
    "CONTRATO": """Elabore um CONTRATO completo seguindo boas práticas jurídicas.

Estrutura:
1. **Título e identificação**
2. **Qualificação das partes** (completa, com representantes legais)
3. **Considerandos / Recitals** (contexto e motivação)
4. **Cláusulas**:
   - Objeto (claro e delimitado)
   - Prazo e vigência
   - Preço e condições de pagamento
   - Obrigações das partes (em cláusulas separadas)
   - Garantias
   - Confidencialidade
   - Propriedade intelectual (se aplicável)
   - Responsabilidade civil e limitação de responsabilidade
   - Caso fortuito / força maior
   - Rescisão (hipóteses e consequências)
   - Multa e penalidades
   - Disposições gerais
   - Foro de eleição (justificado)
5. **Encerramento e assinaturas**
6. **Testemunhas**

Cláusulas numeradas sequencialmente. Parágrafos e incisos dentro de cada cláusula.""",

    "NOTIFICACAO": """Elabore uma NOTIFICAÇÃO EXTRAJUDICIAL formal.

Estrutura:
1. Identificação (Notificante e Notificado com qualificação)
2. Dos fatos (exposição objetiva da situação)
3. Do direito (fundamentação legal que ampara a notificação)
4. Da finalidade (o que se pretende com a notificação)
5. Do prazo (prazo para cumprimento/resposta)
6. Das consequências (medidas judiciais cabíveis em caso de descumprimento)
7. Encerramento
8. Requerimento de acusação de recebimento

Tom firme mas respeitoso. Linguagem clara para o destinatário.""",

    "ACORDO": """Elabore um INSTRUMENTO DE ACORDO / TRANSAÇÃO.

Estrutura:
1. Qualificação das partes
2. Considerandos (litígio/débito objeto do acordo)
3. Cláusulas:
   - Objeto do acordo
   - Valor total e condições de pagamento (parcelas, datas, forma)
   - Garantias (avalista, penhor, hipoteca, fiança)
   - Multa por inadimplemento
   - Confissão de dívida (se aplicável)
   - Renúncia a direitos (quitação plena ou parcial)
   - Confidencialidade
   - Revogação em caso de inadimplemento
   - Foro
4. Assinaturas e testemunhas

Se for para homologação judicial: incluir petição requerendo homologação (art. 487, III, "b", CPC).""",

    "PROCURACAO": """Elabore uma PROCURAÇÃO AD JUDICIA E EXTRA.

Estrutura:
1. Outorgante (qualificação completa)
2. Outorgados (advogados com nome, OAB)
3. Poderes:
   - Foro em geral (ad judicia)
   - Poderes especiais (art. 105 CPC): receber citação, confessar, reconhecer procedência, transigir, desistir, renunciar, receber e dar quitação
   - Poderes extras se necessário
4. Finalidade específica (se procuração especial)
5. Validade
6. Local, data e assinatura""",

    # Correspondence
    "EMAIL_CLIENTE": """Elabore um E-MAIL PROFISSIONAL para o cliente.

Diretrizes:
- Saudação formal mas cordial
- Contexto breve (qual processo/projeto se refere)
- Informação principal em destaque
- Próximos passos com datas
- Tom adequado ao destinatário
- Encerramento cordial

Se for atualização de processo: status atual, movimentação, prazo, providência necessária do cliente.
Se for cobrança de documentos: listar documentos pendentes com prazo.
Se for relatório: resumo executivo + detalhamento.""",

    "EMAIL_CONTRAPARTE": """Elabore um E-MAIL PROFISSIONAL para advogado da parte contrária.

Diretrizes:
- Tom estritamente profissional e cordial
- Referência ao processo/procedimento
- Objetivo claro da comunicação
- Não revelar estratégia do cliente
- Formalidade adequada entre pares

Atenção ao Código de Ética da OAB — art. 2º §2º: urbanidade entre advogados.""",

    "EMAIL_TRIBUNAL": """Elabore um E-MAIL para protocolo ou comunicação com o TRIBUNAL/VARA.

Diretrizes:
- Formalidade máxima
- Referência completa ao processo (número, vara, juiz)
- Objeto claro
- Documentos anexos referenciados
- Pedido específico""",

    # Agribusiness
    "CONTRATO_RURAL": """Elabore um CONTRATO de natureza rural/agrária.

Considerar:
- Estatuto da Terra (Lei 4.504/1964)
- Código Civil arts. 1.196 ss. (posse), 1.228 ss. (propriedade)
- Lei do Crédito Rural (Lei 4.829/1965)
- Legislação de CPR (Lei 8.929/1994)
- Normas do INCRA
- Peculiaridades: safra, clima, seguro rural, prazos agrícolas

Tipos comuns: arrendamento rural, parceria agrícola, compra e venda de imóvel rural, CPR, contrato de financiamento rural.""",

    # Reports
    "RELATORIO_CLIENTE": """Elabore um RELATÓRIO DE ATIVIDADES para o cliente.

Estrutura:
1. **Cabeçalho**: Período, cliente, processos/projetos cobertos
2. **Resumo Executivo** (3-5 parágrafos no máximo)
3. **Detalhamento por processo/projeto**:
   - Status atual
   - Atividades realizadas no período
   - Resultados obtidos
   - Pendências e próximos passos
4. **Cronograma atualizado**
5. **Alertas e recomendações**
6. **Quadro financeiro** (se aplicável)

Linguagem acessível ao cliente não-advogado. Traduzir termos jurídicos.""",

    # Review checklist (also used by review prompts)
    "REVISAO_IA": """Revise o documento nos seguintes 5 ASPECTOS:

## 1. REVISÃO GRAMATICAL E ESTILÍSTICA
- Erros ortográficos, concordância verbal e nominal
- Regência verbal e nominal
- Pontuação
- Clareza e coesão textual
- Terminologia jurídica adequada
- Redundâncias e vícios de linguagem

## 2. REVISÃO DE FUNDAMENTAÇÃO JURÍDICA
- Artigos de lei citados corretamente (número, lei, vigência)
- Jurisprudência pertinente e atualizada
- Doutrina relevante
- Suficiência da fundamentação para cada pedido
- Coerência entre fundamentos e pedidos

## 3. REVISÃO ESTRATÉGICA
- Eficácia persuasiva dos argumentos
- Ordem dos argumentos (mais forte ao mais fraco)
- Antecipação de contra-argumentos
- Completude das teses
- Adequação ao destinatário

## 4. ANÁLISE DE RISCOS
- Argumentos vulneráveis a contra-ataque
- Omissões que podem ser exploradas
- Prazos e formalidades atendidos
- Jurisprudência desfavorável não mencionada
- Riscos processuais

## 5. FORMATAÇÃO E CONFORMIDADE
- Estrutura formal adequada ao tipo de peça
- Endereçamento correto
- Qualificação das partes
- Fechamento e assinatura
- Documentos referenciados

Para cada aspecto, apresente:
- **Nota** (1-10)
- **Problemas encontrados** (lista)
- **Sugestões de melhoria** (texto corrigido quando aplicável)
- **Nota geral** ao final""",

    # Other analyses
    "PLANILHA_CREDORES": """Elabore uma análise para QUADRO GERAL DE CREDORES.

Estrutura:
1. Identificação do processo
2. Análise por classe (art. 41 e 83 da LRF):
   - Classe I — Créditos Trabalhistas (limite 150 SM)
   - Classe II — Créditos com Garantia Real (até valor do bem)
   - Classe III — Créditos Quirografários
   - Classe IV — Créditos de ME/EPP
3. Totais por classe
4. Créditos extraconcursais (art. 84)
5. Créditos não sujeitos (art. 49 §3º e §4º)
6. Análise de quórum (art. 45):
   - Classe I: maioria simples dos presentes
   - Classes II: maioria do crédito presente + maioria de credores presentes
   - Classe III: maioria do crédito presente + maioria de credores presentes
   - Classe IV: maioria dos presentes
7. Simulação de votação (cenários)""",

    "ANALISE_CREDITO_RURAL": """Elabore uma ANÁLISE DE CRÉDITO RURAL.

Considerar:
1. Tipo de crédito (custeio, investimento, comercialização, industrialização)
2. Fonte de recursos (controlado, não controlado, livre)
3. Enquadramento (PRONAF, PRONAMP, demais)
4. Garantias: penhor rural, hipoteca, alienação fiduciária, aval, CPR
5. Requisitos documentais
6. Limites e taxas (Resolução CMN vigente)
7. Renegociação (Lei 13.340/2016 e atualizações)
8. Riscos e mitigações""",
}

DOCUMENT_TYPE_INSTRUCTIONS: Mapping[str, str] = MappingProxyType(_INSTRUCTIONS)

# Key of the generic review checklist used by review prompts
REVIEW_INSTRUCTIONS_KEY = "REVISAO_IA"


def get_document_type_instructions(document_type: str | None) -> str | None:
    """Return the instructions for a document type, or None if there are none."""
    if not document_type:
        return None
    return DOCUMENT_TYPE_INSTRUCTIONS.get(document_type)
