"""Judicial case records: loading, sorting, counting and exporting."""

from __future__ import annotations

import csv
import logging
import re
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path
from typing import Iterable, Sequence

log = logging.getLogger(__name__)

CABECALHO = ("id", "numero", "data_ajuizamento", "id_classe", "id_assunto", "ano_eleicao")
TAMANHO_MAX_CODIGOS = 19

_DATA_ISO = re.compile(r"\s*([+-]?\d+)-([+-]?\d+)-([+-]?\d+)")
_DATA_BR = re.compile(r"\s*([+-]?\d+)/([+-]?\d+)/([+-]?\d+)")


class FormatoInvalido(ValueError):
    """A record or a date does not have the expected format."""


@dataclass
class Processo:
    """One case record as found in the CSV base."""

    id: int
    numero: str
    data_ajuizamento: str
    id_classe: str
    id_assunto: str
    ano_eleicao: int = 0

    @property
    def classes(self) -> list[str]:
        return _codigos(self.id_classe)

    @property
    def assuntos(self) -> list[str]:
        return _codigos(self.id_assunto)


def _codigos(texto: str) -> list[str]:
    return [codigo.strip() for codigo in texto.split(",") if codigo.strip()]


def _entre_chaves(texto: str, ate_ultima: bool) -> str:
    inicio = texto.find("{")
    fim = texto.rfind("}") if ate_ultima else texto.find("}")
    if inicio >= 0 and fim > inicio:
        return texto[inicio + 1:fim]
    return texto.strip().strip('"')


def _codigo_limitado(texto: str, campo: str, ate_ultima: bool) -> str:
    valor = _entre_chaves(texto, ate_ultima)
    if len(valor) > TAMANHO_MAX_CODIGOS:
        raise FormatoInvalido(f"{campo} muito grande: {valor!r}")
    return valor


def _inteiro(texto: str, campo: str) -> int:
    try:
        return int(texto.strip())
    except ValueError:
        raise FormatoInvalido(f"{campo} inválido: {texto!r}") from None


def _de_campos(campos: Sequence[str]) -> Processo:
    if len(campos) < 3:
        raise FormatoInvalido(f"registro incompleto: {campos!r}")
    data = campos[2].strip()
    if "." in data:
        data = data.rpartition(".")[0]
    ano_texto = campos[5].strip() if len(campos) > 5 else ""
    return Processo(
        id=_inteiro(campos[0], "id"),
        numero=campos[1].strip(),
        data_ajuizamento=data,
        id_classe=_codigo_limitado(campos[3], "id_classe", False) if len(campos) > 3 else "",
        id_assunto=_codigo_limitado(campos[4], "id_assunto", True) if len(campos) > 4 else "",
        ano_eleicao=_inteiro(ano_texto, "ano_eleicao") if ano_texto else 0,
    )


def parse_linha(linha: str) -> Processo:
    """Parse one CSV data line into a Processo."""
    campos = next(csv.reader([linha.rstrip("\r\n")]), [])
    return _de_campos(campos)


def carregar_processos(caminho: str | Path, limite: int | None = None) -> list[Processo]:
    """Load up to ``limite`` records from a CSV file, skipping the header and bad rows."""
    processos: list[Processo] = []
    with open(caminho, encoding="utf-8", newline="") as arquivo:
        leitor = csv.reader(arquivo)
        next(leitor, None)
        for numero_linha, campos in enumerate(leitor, start=2):
            if limite is not None and len(processos) >= limite:
                break
            if not campos:
                continue
            try:
                processos.append(_de_campos(campos))
            except FormatoInvalido as erro:
                log.warning("Linha %d ignorada: %s", numero_linha, erro)
    return processos


def ordenar_por_id(processos: Iterable[Processo]) -> list[Processo]:
    """Return the records in ascending order of id."""
    return sorted(processos, key=lambda p: p.id)


def ordenar_por_data(processos: Iterable[Processo]) -> list[Processo]:
    """Return the records in descending order of filing date."""
    return sorted(processos, key=lambda p: p.data_ajuizamento, reverse=True)


def salvar_csv(caminho: str | Path, processos: Iterable[Processo]) -> None:
    """Write the records in the same CSV layout as the input base."""
    with open(caminho, "w", encoding="utf-8", newline="") as arquivo:
        arquivo.write(",".join(f'"{nome}"' for nome in CABECALHO) + "\n")
        for p in processos:
            arquivo.write(
                f'{p.id},"{p.numero}","{p.data_ajuizamento}.000",'
                f'"{{{p.id_classe}}}","{{{p.id_assunto}}}",{p.ano_eleicao}\n'
            )


def contar_por_classe(processos: Iterable[Processo], id_classe: str) -> int:
    """Count the records linked to the given class id."""
    alvo = id_classe.strip()
    return sum(1 for p in processos if alvo in p.classes)


def contar_assuntos_unicos(processos: Iterable[Processo]) -> int:
    """Count the distinct subject ids present in the records."""
    return len({assunto for p in processos for assunto in p.assuntos})


def multiplos_assuntos(processos: Iterable[Processo]) -> list[Processo]:
    """Return the records linked to more than one subject."""
    return [p for p in processos if "," in p.id_assunto]


def _normalizar(ano: int, mes: int, dia: int) -> date:
    extra, mes_zero = divmod(mes - 1, 12)
    try:
        return date(ano + extra, mes_zero + 1, 1) + timedelta(days=dia - 1)
    except (ValueError, OverflowError):
        raise FormatoInvalido(f"data fora do intervalo: {ano}-{mes}-{dia}") from None


def calcular_dias_tramitando(data_ajuizamento: str, data_atual: str) -> int:
    """Days between a filing date (aaaa-mm-dd...) and a current date (dd/mm/aaaa)."""
    inicio = _DATA_ISO.match(data_ajuizamento)
    if inicio is None:
        raise FormatoInvalido(f"formato inválido de data de ajuizamento: {data_ajuizamento!r}")
    final = _DATA_BR.match(data_atual)
    if final is None:
        raise FormatoInvalido(f"formato inválido da data atual: {data_atual!r}")
    ano_i, mes_i, dia_i = (int(g) for g in inicio.groups())
    dia_f, mes_f, ano_f = (int(g) for g in final.groups())
    return (_normalizar(ano_f, mes_f, dia_f) - _normalizar(ano_i, mes_i, dia_i)).days