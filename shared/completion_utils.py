"""
Question answering over page content with Gemini.

The completion service is treated as text in, text out: one system
instruction, one user message, fixed sampling parameters.
"""

import logging

import google.generativeai as genai

from .config_utils import DEFAULT_MODEL

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    'あなたは親切で知識豊富なアシスタントです。'
    '与えられたWebページの内容に基づいて、ユーザーの質問に日本語で回答してください。'
)

GENERATION_CONFIG = {
    'temperature': 0.7,
    'max_output_tokens': 1000,
}

FALLBACK_ANSWER = '回答を生成できませんでした'


def build_user_prompt(content: str, question: str) -> str:
    return f"""以下のWebページの内容について質問があります。

Webページの内容:
{content}

質問: {question}

上記の内容に基づいて、質問に回答してください。"""


def _response_text(response) -> str:
    # .text raises ValueError when the candidate has no parts (e.g. blocked)
    try:
        return (response.text or '').strip()
    except ValueError as e:
        logger.warning("Completion returned no text: %s", e)
        return ''


def generate_answer(api_key: str, content: str, question: str, model_name: str = DEFAULT_MODEL) -> str:
    """
    Ask Gemini to answer question from the given page content.

    Returns the completion text, or FALLBACK_ANSWER when it is empty.
    Errors from the client are propagated to the caller.
    """
    genai.configure(api_key=api_key)
    model = genai.GenerativeModel(
        model_name,
        system_instruction=SYSTEM_INSTRUCTION,
        generation_config=GENERATION_CONFIG,
    )

    response = model.generate_content(build_user_prompt(content, question))
    return _response_text(response) or FALLBACK_ANSWER
