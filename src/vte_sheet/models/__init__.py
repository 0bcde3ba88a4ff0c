"""
Domain models for characters and their traits.

Modules:
    constants: Template keys, trait types/categories and data keywords.
    trait_data: Parser for the keyword-encoded trait data field.
    trait: Catalog trait definitions and per-character trait instances.
    template: Character templates.
    moral_path: Moral Paths and their hierarchies of sins.
    character: The Character aggregate.
"""
