"""
Keyword rules for equipment failure descriptions.

Rules are checked in order against the lower-cased description and the first
match decides summary, confidence and actions together. The last rule has no
keywords and always matches.
"""
import logging
from typing import Sequence, Tuple

from app.schemas.models import DiagnosisRule
from app.utils.text import trim_text

log = logging.getLogger("diagnosis")

EMPTY_CONFIDENCE = 0.4
DEFAULT_CONFIDENCE = 0.65

EMPTY_INPUT_RULE = DiagnosisRule(
    name="empty",
    summary="Describe el problema (equipo, marca/modelo, síntomas) para sugerir un diagnóstico.",
    confidence=EMPTY_CONFIDENCE,
    actions=(
        "Escribe el equipo y marca/modelo",
        "Indica qué falla exactamente (no enciende, ruido, fuga, etc.)",
        "Agrega foto/video si es posible",
    ),
)

POWER_RULE = DiagnosisRule(
    name="power",
    keywords=("no enciende", "no prende"),
    summary=(
        "Parece un problema de alimentación eléctrica o fuente "
        "(cable, toma, fusible interno o placa)."
    ),
    confidence=DEFAULT_CONFIDENCE,
    actions=(
        "Prueba otro enchufe/toma eléctrica",
        "Verifica cable y cargador (si aplica)",
        "Si huele a quemado o hubo chispa: NO lo enciendas y solicita técnico",
    ),
)

LEAK_RULE = DiagnosisRule(
    name="leak",
    keywords=("fuga", "gotea", "agua"),
    summary=(
        "Posible fuga por manguera/sello/empaque. "
        "Se recomienda cortar el agua/energía y revisar conexiones."
    ),
    confidence=DEFAULT_CONFIDENCE,
    actions=(
        "Cierra la llave de agua (si aplica) y desconecta energía",
        "Revisa mangueras y uniones visibles",
        "Toma fotos de la zona de fuga para el técnico",
    ),
)

NOISE_RULE = DiagnosisRule(
    name="noise",
    keywords=("ruido", "vibra"),
    summary=(
        "Puede ser desbalance, pieza floja o desgaste de rodamientos/ventilador. "
        "Conviene revisar fijaciones y estado de partes móviles."
    ),
    confidence=DEFAULT_CONFIDENCE,
    actions=(
        "Revisa tornillos/soportes y nivelación",
        "Evita usar el equipo si el ruido aumenta",
        "Describe cuándo ocurre (al arrancar, en carga, constante)",
    ),
)

FALLBACK_RULE = DiagnosisRule(
    name="generic",
    summary=(
        "Diagnóstico preliminar: puede ser una falla común de conexión/consumo/ajuste. "
        "Un técnico puede confirmar en sitio con pruebas básicas."
    ),
    confidence=DEFAULT_CONFIDENCE,
    actions=(
        "Indica marca/modelo y tiempo de uso",
        "Describe síntomas y cuándo empezó",
        "Adjunta fotos del equipo y del área de instalación",
    ),
)

# Priority order matters: power before leak before noise.
DEFAULT_RULES: Tuple[DiagnosisRule, ...] = (POWER_RULE, LEAK_RULE, NOISE_RULE, FALLBACK_RULE)

def classify(
    description: str,
    rules: Sequence[DiagnosisRule] = DEFAULT_RULES,
    empty_rule: DiagnosisRule = EMPTY_INPUT_RULE,
) -> DiagnosisRule:
    text = trim_text(description)
    if not text:
        return empty_rule

    lowered = text.lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule

    # Custom rule tables may omit a catch-all
    log.warning("No rule matched (rules=%d); using generic fallback", len(rules))
    return FALLBACK_RULE
