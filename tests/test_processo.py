import pytest

from processos.processo import (
    FormatoInvalido,
    Processo,
    calcular_dias_tramitando,
    carregar_processos,
    contar_assuntos_unicos,
    contar_por_classe,
    multiplos_assuntos,
    ordenar_por_data,
    ordenar_por_id,
    parse_linha,
    salvar_csv,
)

HEADER = '"id","numero","data_ajuizamento","id_classe","id_assunto","ano_eleicao"\n'
LINHAS = [
    '638633058,"00000103020166130174","2016-04-20 15:03:40.000","{12554}","{11778}",2016\n',
    '405277959,"06000824620216130000","2021-07-01 19:53:00.000","{12377}","{11778,11779}",2020\n',
    '405287812,"06000861920216130000","2021-07-02 14:24:32.000","{12554}","{11780}",2020\n',
]


@pytest.fixture
def base(tmp_path):
    caminho = tmp_path / "base.csv"
    caminho.write_text(HEADER + "".join(LINHAS), encoding="utf-8")
    return caminho


@pytest.fixture
def processos(base):
    return carregar_processos(base)


def test_parse_linha_fields():
    p = parse_linha(LINHAS[0])
    assert p == Processo(638633058, "00000103020166130174", "2016-04-20 15:03:40", "12554", "11778", 2016)


def test_parse_linha_multiple_subjects():
    p = parse_linha(LINHAS[1])
    assert p.id_assunto == "11778,11779"
    assert p.assuntos == ["11778", "11779"]


def test_parse_linha_without_braces_and_year():
    p = parse_linha('7,"123","2020-01-02 00:00:00.000",55,66')
    assert (p.id_classe, p.id_assunto, p.ano_eleicao) == ("55", "66", 0)


def test_parse_linha_code_too_long():
    with pytest.raises(FormatoInvalido):
        parse_linha('1,"1","2020-01-02 00:00:00.000","{12554}","{' + "1" * 25 + '}",2020')


def test_parse_linha_bad_id():
    with pytest.raises(FormatoInvalido):
        parse_linha('abc,"1","2020-01-02","{1}","{2}",2020')


def test_carregar_counts_lines(processos):
    assert [p.id for p in processos] == [parse_linha(linha).id for linha in LINHAS]


def test_carregar_respects_limit(base):
    assert len(carregar_processos(base, 2)) == 2


def test_carregar_skips_bad_lines(tmp_path):
    caminho = tmp_path / "b.csv"
    caminho.write_text(HEADER + "xx,\"1\",\"2020-01-01\",\"{1}\",\"{2}\",1\n" + LINHAS[0], encoding="utf-8")
    assert carregar_processos(caminho) == [parse_linha(LINHAS[0])]


def test_carregar_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        carregar_processos(tmp_path / "nada.csv")


def test_ordenar_por_id(processos):
    ids = [p.id for p in ordenar_por_id(processos)]
    assert ids == sorted(ids)
    assert sorted(ids) == sorted(p.id for p in processos)


def test_ordenar_por_data(processos):
    datas = [p.data_ajuizamento for p in ordenar_por_data(processos)]
    assert all(a >= b for a, b in zip(datas, datas[1:]))
    assert len(datas) == len(processos)


def test_salvar_round_trip(processos, tmp_path):
    destino = tmp_path / "saida.csv"
    salvar_csv(destino, processos)
    assert carregar_processos(destino) == processos
    assert destino.read_text(encoding="utf-8").startswith(HEADER)


def test_salvar_line_format(tmp_path):
    destino = tmp_path / "um.csv"
    salvar_csv(destino, [parse_linha(LINHAS[0])])
    assert destino.read_text(encoding="utf-8").splitlines()[1] == LINHAS[0].rstrip("\n")


def test_contar_por_classe(processos):
    assert contar_por_classe(processos, "12554") == 2
    assert contar_por_classe(processos, "99999") == 0


def test_contar_assuntos_unicos(processos):
    assert contar_assuntos_unicos(processos) == 3


def test_multiplos_assuntos(processos):
    assert [p.id for p in multiplos_assuntos(processos)] == [parse_linha(LINHAS[1]).id]


def test_dias_leap_year():
    assert calcular_dias_tramitando("2016-01-01 10:00:00", "01/01/2017") == 366


def test_dias_additive():
    total = calcular_dias_tramitando("2016-04-20", "10/03/2021")
    parte1 = calcular_dias_tramitando("2016-04-20", "05/06/2018")
    parte2 = calcular_dias_tramitando("2018-06-05", "10/03/2021")
    assert total == parte1 + parte2


def test_dias_negative_when_current_earlier():
    assert calcular_dias_tramitando("2021-07-01", "01/07/2020") < 0


def test_dias_normalizes_overflowing_day():
    assert calcular_dias_tramitando("2016-01-32", "01/03/2016") == calcular_dias_tramitando(
        "2016-02-01", "01/03/2016"
    )


@pytest.mark.parametrize(
    "ajuizamento, atual",
    [("20/04/2016", "01/01/2020"), ("2016-04-20", "2020-01-01"), ("", "01/01/2020")],
)
def test_dias_invalid_format(ajuizamento, atual):
    with pytest.raises(FormatoInvalido):
        calcular_dias_tramitando(ajuizamento, atual)