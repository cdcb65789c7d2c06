"""Team schemas for API responses."""

from pydantic import BaseModel, Field


class TeamOut(BaseModel):
    """Team as exposed by the API, with Portuguese field names and colors."""

    id: int = Field(..., description="football-data.org team identifier")
    nome: str = Field(..., description="Team name")
    nome_curto: str | None = Field(None, description="Short name")
    sigla: str | None = Field(None, description="Three-letter code")
    escudo: str | None = Field(None, description="Crest image URL")
    estadio: str | None = Field(None, description="Stadium name")
    cores_clube: str | None = Field(None, description="Club colors, e.g. 'vermelho / branco'")
    fundado: int | None = Field(None, description="Founding year")
    endereco: str | None = Field(None, description="Postal address")
    site: str | None = Field(None, description="Website URL")


class Pagination(BaseModel):
    """Paging metadata."""

    total: int
    totalPaginas: int
    paginaAtual: int
    limite: int
    temProximaPagina: bool
    temPaginaAnterior: bool


class TeamPage(BaseModel):
    """One page of teams."""

    dados: list[TeamOut]
    paginacao: Pagination


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
