# processos

Tools for court case records (*processos*) exported as CSV. Each row has
an `id`, a case `numero`, a filing date (`data_ajuizamento`), one or more
class ids (`id_classe`), one or more subject ids (`id_assunto`) and an
election year (`ano_eleicao`). The class and subject fields are written in
braces, for example `"{12554}"` or `"{11778,11779}"`.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
processos [arquivo]
```

`arquivo` is the CSV file to read. Without it, the command reads
`processo_043_202409032338.csv` from the current directory. At most 20000
records are loaded. If the file cannot be opened or holds no valid records,
the command prints an error and exits with status 1.

After printing how many records were loaded, it shows a menu and reads one
choice:

1. Sort by id (ascending) and write `processos_ordenados_por_id.csv`
2. Sort by filing date (descending) and write `processos_ordenados_por_data.csv`
3. Ask for a class id and count the records that carry it
4. Count how many distinct subject ids appear in the data
5. List the records linked to more than one subject
6. Ask for today's date as `dd/mm/aaaa` and print, for every record, how many
   days it has been in progress, or that its date is invalid
7. Quit

The output files are written to the current directory, in the same layout as
the input.

The menu runs a single action and then exits; to run another, start the
command again. Nothing is changed in the input file, and no state is kept
between runs.

## Library

All operations are available from `processos.processo`:

```python
from processos.processo import (
    carregar_processos,
    ordenar_por_id,
    ordenar_por_data,
    salvar_csv,
    contar_por_classe,
    contar_assuntos_unicos,
    multiplos_assuntos,
    calcular_dias_tramitando,
)

registros = carregar_processos("processos.csv", 20000)

salvar_csv("por_id.csv", ordenar_por_id(registros))
salvar_csv("por_data.csv", ordenar_por_data(registros))

print(contar_por_classe(registros, "12554"))
print(contar_assuntos_unicos(registros))

for p in multiplos_assuntos(registros):
    print(p.id, p.numero, p.id_assunto)

print(calcular_dias_tramitando("2024-01-15", "03/09/2024"))
```

- `Processo` is a dataclass holding one record. Its `classes` and `assuntos`
  properties split `id_classe` and `id_assunto` into lists of ids.
- `parse_linha(linha)` turns one CSV data line into a `Processo`.
- `carregar_processos(caminho, limite=None)` skips the header line and loads
  up to `limite` records. Rows that cannot be parsed are skipped and a
  warning is logged through the `logging` module.
- `ordenar_por_id` and `ordenar_por_data` return new sorted lists; the input
  is left unchanged.
- `salvar_csv(caminho, processos)` writes the records with the header line,
  appending `.000` to the filing date and putting the ids back in braces.
- `contar_por_classe(processos, id_classe)` counts records whose class ids
  include `id_classe`.
- `multiplos_assuntos(processos)` returns records whose `id_assunto` holds
  more than one id.
- `calcular_dias_tramitando(data_ajuizamento, data_atual)` takes the filing
  date as `aaaa-mm-dd` (any time after it is ignored) and the current date
  as `dd/mm/aaaa`, and returns the number of days between them. Days or
  months out of range roll over into the next month or year.

`FormatoInvalido`, a subclass of `ValueError`, is raised for malformed input:
a record with too few fields, a non-numeric id or election year, a class or
subject field longer than 19 characters, or a date that cannot be read.