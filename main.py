"""ASGI entrypoint: ``uvicorn main:app``."""

from actor_facts_skill.bootstrap import create_default_app

app = create_default_app()
