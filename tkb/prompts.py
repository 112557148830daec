from tkb.schema import ObjectKind

INSTANCE_PROMPT = """
Generate a completely random proper noun that exists, and define it using an object-oriented structure with the
following standard format:

{Object Name}

- Attributes:
    - {AttributeName}: {AttributeValue}
    - ...

- Behaviors:
    - {BehaviorName}
    - ...

Attributes can only be either integers, decimals, or string values.
Behaviors must only include actions that the object itself actively performs, not actions that the object experiences from other objects.
They must also be very specific actions that complete specific tasks, not general behaviors that can create different outcomes.
Follow the above-specified format strictly when defining your chosen object. Do not add any additional information
or descriptions for any attributes, behaviors or objects.
"""

CONCEPT_PROMPT = """
Generate a completely random noun that exists, and define it using an object-oriented structure corresponding to a class structure with the
following standard format:

{Concept Name}

- Attributes:
    - {AttributeName}
    - ...

- Behaviors:
    - {BehaviorName}
    - ...

Attributes should not have any values associated with them.
Behaviors must only include actions that objects of this concept itself actively perform, not actions that its objects experience from other objects.
They must also be very specific actions that complete specific tasks, not general behaviors that can create different outcomes.
Follow the above-specified format strictly when defining your chosen concept. Do not add any additional information
or descriptions for any attributes, behaviors or concepts.
"""

CONCEPT_PROMPT_SINGLE = """
First, find a completely random topic that exists in real life. Then, generate a single, random idea (representing an abstract or tangible object, place, or person)
that exists within this topic, and define it using an object-oriented structure corresponding to a class structure with the following standard format:

{Concept Name}

- Attributes:
    - {AttributeName}
    - ...

- Behaviors:
    - {BehaviorName}
    - ...

Attributes should not have any values associated with them.
Behaviors must only include actions that objects of this concept itself actively perform, not actions that its objects experience from other objects.
They must also be very specific actions that complete specific tasks, not general behaviors that can create different outcomes.
Follow the above-specified format strictly when defining your chosen concept. Do not add any additional information
or descriptions for any attributes, behaviors or concepts.
"""

PROMPTS = {
    (ObjectKind.INSTANCE, "default"): INSTANCE_PROMPT,
    (ObjectKind.CONCEPT, "default"): CONCEPT_PROMPT,
    (ObjectKind.CONCEPT, "single"): CONCEPT_PROMPT_SINGLE,
}


def get_prompt(kind, variant="default"):
    try:
        return PROMPTS[(ObjectKind(kind), variant)]
    except KeyError:
        variants = sorted(v for k, v in PROMPTS if k == ObjectKind(kind))
        raise ValueError(f"Unknown {ObjectKind(kind).value} prompt variant {variant!r}; expected one of {variants}")
