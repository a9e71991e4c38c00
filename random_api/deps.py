from fastapi import Request

from .source import RandomSource


def get_random_source(request: Request) -> RandomSource:
    return request.app.state.random_source
