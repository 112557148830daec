from tkb.gemini_client import call, extract
from tkb.parser import parse_answer
from tkb.prompts import get_prompt
from tkb.schema import GeneratedObject, ObjectKind


def generate(kind, settings, variant="default") -> GeneratedObject:
    prompt = get_prompt(kind, variant)
    text = extract(call(prompt, settings))
    return parse_answer(text, kind=kind, strip_mode=settings.strip_mode)


def get_instance(settings) -> GeneratedObject:
    return generate(ObjectKind.INSTANCE, settings)


def get_concept(settings, variant="default") -> GeneratedObject:
    return generate(ObjectKind.CONCEPT, settings, variant)
