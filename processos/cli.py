"""Interactive menu over a CSV base of case records."""

from __future__ import annotations

import argparse

from .processo import (
    FormatoInvalido,
    calcular_dias_tramitando,
    carregar_processos,
    contar_assuntos_unicos,
    contar_por_classe,
    multiplos_assuntos,
    ordenar_por_data,
    ordenar_por_id,
    salvar_csv,
)

ARQUIVO_PADRAO = "processo_043_202409032338.csv"
LIMITE = 20000

MENU = """Escolha uma opção:
1. Ordenar por ID (crescente)
2. Ordenar por data (decrescente)
3. Contar por classe
4. Identificar quantos assuntos constam
5. Listar processos que estão vinculados a mais de um assunto
6. Calcular dias tramitando
7. Sair"""


def _ler(prompt: str = "") -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def _escolha() -> int:
    partes = _ler().split()
    try:
        return int(partes[0]) if partes else 0
    except ValueError:
        return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="processos", description="Consultas sobre uma base de processos.")
    parser.add_argument("arquivo", nargs="?", default=ARQUIVO_PADRAO, help="arquivo CSV de processos")
    args = parser.parse_args(argv)

    try:
        processos = carregar_processos(args.arquivo, LIMITE)
    except OSError:
        print("Erro ao abrir o arquivo.")
        processos = []
    if not processos:
        print("Erro ao carregar os processos.")
        return 1

    print(f"Total de processos carregados: {len(processos)}")
    print(MENU)
    escolha = _escolha()

    if escolha == 1:
        salvar_csv("processos_ordenados_por_id.csv", ordenar_por_id(processos))
        print("Processos ordenados por ID. Novo arquivo criado")
    elif escolha == 2:
        salvar_csv("processos_ordenados_por_data.csv", ordenar_por_data(processos))
        print("Processos ordenados por data. Novo arquivo criado")
    elif escolha == 3:
        partes = _ler("Digite o ID da classe: ").split()
        id_classe = partes[0] if partes else ""
        print(f"Total de processos na classe {id_classe}: {contar_por_classe(processos, id_classe)}")
    elif escolha == 4:
        print(f"Total de assuntos únicos: {contar_assuntos_unicos(processos)}")
    elif escolha == 5:
        print("\nProcessos com mais de um assunto:")
        print("==================================")
        for p in multiplos_assuntos(processos):
            print(f"ID: {p.id} | Numero: {p.numero} | Assuntos: {p.id_assunto}")
    elif escolha == 6:
        partes = _ler("Digite a data atual (dd/mm/aaaa): ").split()
        data_atual = partes[0][:10] if partes else ""
        for p in processos:
            try:
                dias = calcular_dias_tramitando(p.data_ajuizamento, data_atual)
            except FormatoInvalido:
                dias = -1
            if dias >= 0:
                print(f"Processo ID {p.id} está em tramitação há {dias} dias.")
            else:
                print(f"Processo ID {p.id} tem data inválida.")
    elif escolha == 7:
        print("Saindo...")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())