"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Los registros RDAP son documentos semi-estructurados; cada RIR los rellena a
  su manera. Los validadores `mode="before"` toleran formas inesperadas sin
  convertir esto en una validación completa del esquema RDAP.
- Los modelos son inmutables (`frozen=True`): el extractor solo los lee.

Nota:
- Estos modelos describen *qué* es un autnum, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _optional_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _flatten_strings(value: Any, out: list[str]) -> None:
    # Los valores jCard pueden venir anidados (p.ej. "adr" o "n").
    if isinstance(value, str):
        out.append(value)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _flatten_strings(item, out)


class VCardProperty(BaseModel):
    """Una propiedad jCard: `[name, parameters, type, value, ...]`."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Nombre de la propiedad (p.ej. 'fn', 'kind').")
    parameters: dict[str, Any] = Field(default_factory=dict)
    type: str = Field(default="text", description="Tipo de valor jCard.")
    value: tuple[Any, ...] = Field(
        default=(),
        description="Valores crudos (todo lo que sigue al tipo en el array jCard).",
    )

    @classmethod
    def from_jcard(cls, item: Any) -> "VCardProperty | None":
        if not isinstance(item, (list, tuple)) or len(item) < 4:
            return None
        name, parameters, value_type = item[0], item[1], item[2]
        if not isinstance(name, str):
            return None
        return cls(
            name=name,
            parameters=parameters if isinstance(parameters, dict) else {},
            type=value_type if isinstance(value_type, str) else "",
            value=tuple(item[3:]),
        )

    def values(self) -> list[str]:
        """Valores de texto aplanados; escalares no textuales se ignoran."""

        out: list[str] = []
        _flatten_strings(self.value, out)
        return out

    def is_named(self, name: str) -> bool:
        return self.name.lower() == name.lower()


class VCard(BaseModel):
    """Tarjeta de contacto de una entidad RDAP (RFC 7095)."""

    model_config = ConfigDict(frozen=True)

    properties: tuple[VCardProperty, ...] = Field(default=())

    @classmethod
    def from_jcard(cls, data: Any) -> "VCard | None":
        """Construye la tarjeta desde `["vcard", [[...], ...]]`.

        Devuelve None si el array no tiene esa forma; las propiedades
        malformadas se descartan.
        """

        if not isinstance(data, (list, tuple)) or len(data) < 2:
            return None
        if not isinstance(data[1], (list, tuple)):
            return None
        properties = [VCardProperty.from_jcard(item) for item in data[1]]
        return cls(properties=tuple(p for p in properties if p is not None))

    def get(self, name: str) -> list[VCardProperty]:
        """Todas las propiedades con ese nombre (sin distinguir mayúsculas), en orden."""

        return [p for p in self.properties if p.is_named(name)]


class Entity(BaseModel):
    """Una parte asociada al autnum (organización, persona, rol)."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    handle: str | None = None
    roles: tuple[str, ...] = Field(default=())
    vcard: VCard | None = Field(default=None, alias="vcardArray")

    @field_validator("handle", mode="before")
    @classmethod
    def _coerce_handle(cls, value: Any) -> str | None:
        return _optional_str(value)

    @field_validator("roles", mode="before")
    @classmethod
    def _coerce_roles(cls, value: Any) -> tuple[str, ...]:
        if isinstance(value, str):
            return (value,)
        if isinstance(value, (list, tuple)):
            return tuple(r for r in value if isinstance(r, str))
        return ()

    @field_validator("vcard", mode="before")
    @classmethod
    def _parse_vcard(cls, value: Any) -> Any:
        if value is None or isinstance(value, (VCard, dict)):
            return value
        return VCard.from_jcard(value)


class Remark(BaseModel):
    """Nota libre del registro (`remarks[]`); APNIC suele poner aquí el nombre."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str | None = None
    description: tuple[str, ...] = Field(default=())

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> str | None:
        return _optional_str(value)

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> tuple[str, ...]:
        if isinstance(value, str):
            return (value,)
        if isinstance(value, (list, tuple)):
            return tuple(line for line in value if isinstance(line, str))
        return ()


def _objects(value: Any) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, (dict, BaseModel))]


class AutnumRecord(BaseModel):
    """Respuesta RDAP de clase `autnum` para un ASN.

    `raw` conserva el documento original tal cual llegó; solo se usa para la
    salida de diagnóstico (`-v`) y no se serializa con el modelo.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    handle: str | None = None
    name: str | None = None
    start_autnum: int | None = Field(default=None, alias="startAutnum")
    end_autnum: int | None = Field(default=None, alias="endAutnum")
    country: str | None = None
    entities: tuple[Entity, ...] = Field(default=())
    remarks: tuple[Remark, ...] = Field(default=())
    raw: dict[str, Any] = Field(default_factory=dict, exclude=True, repr=False)

    @field_validator("handle", "name", "country", mode="before")
    @classmethod
    def _coerce_strings(cls, value: Any) -> str | None:
        return _optional_str(value)

    @field_validator("start_autnum", "end_autnum", mode="before")
    @classmethod
    def _coerce_ints(cls, value: Any) -> int | None:
        return _optional_int(value)

    @field_validator("entities", "remarks", mode="before")
    @classmethod
    def _coerce_sequences(cls, value: Any) -> list[Any]:
        return _objects(value)

    @classmethod
    def from_rdap(cls, document: Mapping[str, Any]) -> "AutnumRecord":
        """Construye el registro desde el JSON RDAP (ya decodificado)."""

        data = dict(document)
        data["raw"] = dict(document)
        return cls.model_validate(data)

    def raw_document(self) -> dict[str, Any]:
        """Documento crudo; si el registro no viene de JSON, su volcado por alias."""

        return self.raw or self.model_dump(mode="json", by_alias=True, exclude_none=True)


ResolutionStatus = Literal["found", "no_name", "error", "invalid"]


class Resolution(BaseModel):
    """Resultado de resolver un argumento de la CLI (exportable a JSON)."""

    argument: str = Field(..., description="Texto tal cual se recibió en la CLI.")
    asn: int | None = Field(default=None, description="ASN interpretado, si se pudo.")
    name: str = Field(default="", max_length=40, description="Nombre extraído (vacío = sin nombre).")
    error: str | None = Field(default=None, description="Mensaje de error, si lo hubo.")
    status: ResolutionStatus = Field(default="no_name")
