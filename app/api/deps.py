"""Shared route dependencies."""

from fastapi import Request

from app.database import Database


def get_database(request: Request) -> Database:
    """Get the database handle opened by the application lifespan."""
    return request.app.state.database
