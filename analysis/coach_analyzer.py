"""
Coaching analysis through the Gemini text-generation API.

The analyzer never raises to its callers: transport errors, HTTP errors and
unusable responses all become an AnalysisResult carrying a fallback text.
"""

import os
import logging
import requests
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, Optional

from models.analysis import AnalysisFailure, AnalysisResult
from models.match_data import MatchData
from models.score import SKILL_NAMES, SKILL_LABELS_PT
from stats.stats_calculator import format_efficiency

logger = logging.getLogger(__name__)

FALLBACK_MESSAGES = {
    'en': {
        'empty': "Could not generate the analysis right now.",
        'error': "Error connecting to the coach intelligence."
    },
    'pt-BR': {
        'empty': "Não foi possível gerar a análise no momento.",
        'error': "Erro ao conectar com a inteligência do treinador."
    }
}

PROMPT_TEMPLATES = {
    'en': (
        "As a professional volleyball coach, analyze the following statistics of a "
        "player/team and give a short, motivational report:\n\n"
        "{summary}\n\n"
        "Identify the strengths, the points to improve and give 3 practical tips based on this data.\n"
        "Answer in English with a professional and encouraging tone."
    ),
    'pt-BR': (
        "Como um técnico de vôlei profissional, analise as seguintes estatísticas de um "
        "jogador/equipe e forneça um relatório curto e motivacional:\n\n"
        "{summary}\n\n"
        "Identifique os pontos fortes, os pontos a melhorar e dê 3 dicas práticas baseadas nesses dados.\n"
        "Responda em Português do Brasil com tom profissional e encorajador."
    )
}

SUMMARY_LINES = {
    'en': "{skill}: Efficiency {efficiency}%, Successes {successes}, Errors {errors}",
    'pt-BR': "{skill}: Eficiência {efficiency}%, Acertos {successes}, Erros {errors}"
}


def _language(language: str) -> str:
    return language if language in PROMPT_TEMPLATES else 'en'


def build_prompt(match_data: MatchData, language: str = 'en') -> str:
    """Render the coaching prompt for one athlete's MatchData."""
    language = _language(language)
    lines = []
    for skill in SKILL_NAMES:
        stats = match_data.get(skill)
        if stats is None:
            continue
        label = SKILL_LABELS_PT.get(skill, skill) if language == 'pt-BR' else skill
        lines.append(SUMMARY_LINES[language].format(
            skill=label,
            efficiency=format_efficiency(stats.efficiency),
            successes=stats.success_count,
            errors=stats.error_count
        ))
    return PROMPT_TEMPLATES[language].format(summary='\n'.join(lines))


def _extract_text(payload: Dict[str, Any]) -> str:
    """Join the text parts of the first candidate."""
    candidates = payload.get('candidates') or []
    if not candidates:
        return ""
    parts = (candidates[0].get('content') or {}).get('parts') or []
    texts = [part.get('text') for part in parts if isinstance(part.get('text'), str)]
    return ''.join(texts).strip()


class CoachAnalyzer:
    """Requests a natural-language coaching summary for a MatchData."""

    def __init__(self, config: Dict[str, Any], session: Optional[requests.Session] = None):
        analysis_config = config.get('analysis', {})
        self.model = analysis_config.get('model', 'gemini-3-flash-preview')
        self.endpoint = analysis_config.get(
            'endpoint', 'https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent'
        )
        self.timeout = analysis_config.get('timeout', 30)
        self.language = _language(analysis_config.get('language', 'en'))
        self.api_key = os.environ.get(analysis_config.get('api_key_env', 'API_KEY'), '')
        self.session = session or requests.Session()
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix='coach-analysis')

    def _fallback(self, kind: str, reason: AnalysisFailure, detail: Optional[str] = None) -> AnalysisResult:
        return AnalysisResult(
            text=FALLBACK_MESSAGES[self.language][kind], failure_reason=reason, detail=detail
        )

    def analyze(self, match_data: MatchData) -> AnalysisResult:
        """Return the generated analysis, or a fallback text on any failure."""
        if not self.api_key:
            logger.error("Coach analysis unavailable: no API key configured")
            return self._fallback('error', AnalysisFailure.MISSING_API_KEY)

        prompt = build_prompt(match_data, self.language)
        url = self.endpoint.format(model=self.model)

        try:
            response = self.session.post(
                url,
                params={'key': self.api_key},
                json={'contents': [{'parts': [{'text': prompt}]}]},
                timeout=self.timeout
            )
            response.raise_for_status()
            text = _extract_text(response.json())
        except requests.RequestException as e:
            logger.error(f"Error in coach analysis request: {e}")
            return self._fallback('error', AnalysisFailure.REQUEST_FAILED, str(e))
        except (ValueError, AttributeError, TypeError) as e:
            logger.error(f"Unreadable coach analysis response: {e}")
            return self._fallback('error', AnalysisFailure.INVALID_RESPONSE, str(e))

        if not text:
            logger.warning("Coach analysis returned no text")
            return self._fallback('empty', AnalysisFailure.EMPTY_RESPONSE)

        logger.info(f"Received coach analysis ({len(text)} characters)")
        return AnalysisResult(text=text)

    def analyze_async(self, match_data: MatchData) -> Future:
        """Run analyze() in the background; the future always resolves to an AnalysisResult."""
        return self._executor.submit(self.analyze, match_data)

    def close(self) -> None:
        self._executor.shutdown(wait=False)
        self.session.close()
