"""Interactive study of sorting and searching algorithms with comparison counts."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Callable, Sequence

_EXPLANATIONS = {
    1: (
        "Bubble Sort: e um algoritmo simples, mas ineficiente, que percorre repetidamente a lista "
        "e compara pares adjacentes de elementos e os troca se estiverem na ordem errada. "
        "O Bubble Sort tem uma complexidade de tempo de O(n^2)."
    ),
    2: (
        "Selection Sort: e um algoritmo simples que percorre a lista e seleciona o menor elemento "
        "em cada iteracao e o coloca na posicao correta na lista. O Selection Sort tem uma "
        "complexidade de tempo de O(n^2), mas pode ser mais eficiente do que o Bubble Sort em "
        "listas grandes."
    ),
    3: (
        "Insertion Sort: e um algoritmo simples que percorre a lista de itens a serem ordenados, "
        "inserindo cada elemento na posicao correta em relacao aos elementos anteriores. "
        "O Insertion Sort tem uma complexidade de tempo de O(n^2), mas pode ser mais eficiente "
        "do que o Bubble Sort em listas pequenas."
    ),
    4: (
        "Merge Sort: e um algoritmo de ordenacao mais sofisticado que usa uma abordagem de "
        "'dividir e conquistar'. Divide a lista em duas metades, ordena cada metade "
        "recursivamente e depois une as duas metades ordenadas. O Merge Sort tem uma "
        "complexidade de tempo de O(n log n)."
    ),
    5: (
        "Quick Sort: e um algoritmo de ordenacao rapido que usa uma abordagem de 'dividir e "
        "conquistar' semelhante ao Merge Sort. Divide a lista em duas particoes, escolhendo um "
        "pivo e colocando todos os elementos menores que o pivo na primeira particao e os "
        "maiores na segunda. Em seguida, o algoritmo ordena recursivamente as duas particoes. "
        "O Quick Sort tem uma complexidade de tempo medio de O(n log n), mas pode ser O(n^2) "
        "no pior caso."
    ),
    6: (
        "Heap Sort: e um algoritmo que utiliza uma estrutura de dados chamada Heap para ordenar "
        "os elementos. Ele primeiro coloca os elementos em uma Heap, em seguida, extrai o menor "
        "elemento da Heap ate que todos os elementos sejam ordenados. O Heap Sort tem uma "
        "complexidade de tempo de O(n log n) em todos os casos."
    ),
    7: (
        "O algoritmo de busca linear e um metodo simples para encontrar um elemento em um "
        "conjunto de dados. Ele percorre os elementos um por um ate encontrar o elemento "
        "desejado ou percorrer todos os elementos do conjunto. O tempo de execucao desse "
        "algoritmo e proporcional ao tamanho do conjunto de dados e e chamado de tempo de busca "
        "linear ou tempo linear. A complexidade de tempo da Busca Linear e O(n)."
    ),
    8: (
        "O algoritmo de busca binaria e um metodo eficiente para encontrar um elemento em um "
        "conjunto de dados ordenado. Ele divide repetidamente o conjunto de dados ao meio, "
        "descartando metade do conjunto em cada etapa, ate encontrar o elemento desejado ou "
        "concluir que o elemento nao esta no conjunto de dados. O tempo de execucao desse "
        "algoritmo e proporcional ao logaritmo do tamanho do conjunto de dados e e chamado de "
        "tempo de busca binaria ou tempo logaritmico.. A complexidade de tempo da Busca Binaria "
        "e O(log n)."
    ),
    9: (
        "A diferenca entre os algoritmos de busca linear e binaria e a eficiencia, onde a busca "
        "binaria e mais rapida para grandes conjuntos de dados ordenados."
    ),
    10: (
        "O tempo logaritmico refere-se a relacao entre o tamanho do conjunto de dados e o tempo "
        "de execucao do algoritmo, onde o tempo cresce em proporcao ao logaritmo do tamanho do "
        "conjunto de dados, em vez de crescer em proporcao linear."
    ),
}

DEFAULT_REPEATS = 1_000_000


def linear_search(values: Sequence[int], x: int) -> bool:
    """Return True when ``x`` occurs in ``values``, scanning from the front."""
    for value in values:
        if value == x:
            return True
    return False


def binary_search(values: Sequence[int], x: int) -> int | None:
    """Return an index of ``x`` in the sorted ``values``, or None if absent."""
    left, right = 0, len(values) - 1
    while left <= right:
        middle = (left + right) // 2
        if values[middle] == x:
            return middle
        if values[middle] < x:
            left = middle + 1
        else:
            right = middle - 1
    return None


def counted_bubble_sort(values: list[int]) -> int:
    """Bubble sort in place; return the number of comparisons made."""
    n = len(values)
    count = 0
    for i in range(n - 1):
        for j in range(n - i - 1):
            count += 1
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
    return count


def counted_insertion_sort(values: list[int]) -> int:
    """Insertion sort in place; return the number of element shifts made."""
    count = 0
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            count += 1
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key
    return count


def counted_selection_sort(values: list[int]) -> int:
    """Selection sort in place; return the number of comparisons made."""
    n = len(values)
    count = 0
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            count += 1
            if values[j] < values[smallest]:
                smallest = j
        values[i], values[smallest] = values[smallest], values[i]
    return count


def counted_merge_sort(values: list[int]) -> int:
    """Merge sort in place; return the number of comparisons made while merging."""
    count = 0

    def merge(left: int, middle: int, right: int) -> None:
        nonlocal count
        left_run = values[left:middle + 1]
        right_run = values[middle + 1:right + 1]
        i = j = 0
        k = left
        while i < len(left_run) and j < len(right_run):
            count += 1
            if left_run[i] <= right_run[j]:
                values[k] = left_run[i]
                i += 1
            else:
                values[k] = right_run[j]
                j += 1
            k += 1
        rest = left_run[i:] + right_run[j:]
        values[k:k + len(rest)] = rest

    def sort(left: int, right: int) -> None:
        if left < right:
            middle = left + (right - left) // 2
            sort(left, middle)
            sort(middle + 1, right)
            merge(left, middle, right)

    sort(0, len(values) - 1)
    return count


def middle_pivot_quick_sort(values: list[int]) -> None:
    """Quicksort in place, partitioning around the middle element."""

    def sort(start: int, n: int) -> None:
        if n <= 1:
            return
        pivot = values[start + n // 2]
        a, b = 0, n - 1
        while a <= b:
            if values[start + a] < pivot:
                a += 1
                continue
            if values[start + b] > pivot:
                b -= 1
                continue
            values[start + a], values[start + b] = values[start + b], values[start + a]
            a += 1
            b -= 1
        sort(start, b + 1)
        sort(start + b + 1, n - b - 1)

    sort(0, len(values))


def _heapify(values: list[int], n: int, i: int) -> int:
    count = 0
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        if left < n:
            count += 1
            if values[left] > values[largest]:
                largest = left
        if right < n:
            count += 1
            if values[right] > values[largest]:
                largest = right
        if largest == i:
            return count
        values[i], values[largest] = values[largest], values[i]
        i = largest


def counted_heap_sort(values: list[int]) -> int:
    """Heap sort in place; return the number of comparisons made."""
    n = len(values)
    count = 0
    for i in range(n // 2 - 1, -1, -1):
        count += _heapify(values, n, i)
    for i in range(n - 1, -1, -1):
        values[0], values[i] = values[i], values[0]
        count += _heapify(values, i, 0)
    return count


def sequential_values(n: int) -> list[int]:
    """Return [1, 2, ..., n]."""
    return list(range(1, n + 1))


def random_values(
    n: int, low: int = 0, high: int = 99, rng: random.Random | None = None
) -> list[int]:
    """Return ``n`` random integers between ``low`` and ``high`` inclusive."""
    if high < low:
        raise ValueError("high must not be smaller than low")
    rng = rng or random.Random()
    return [rng.randint(low, high) for _ in range(n)]


def explanation(option: int) -> str:
    """Return the explanation text for a topic numbered 1 to 10."""
    try:
        return _EXPLANATIONS[option]
    except KeyError:
        raise ValueError(f"no explanation for option {option}") from None


def time_search(
    search: Callable[[Sequence[int], int], object],
    values: Sequence[int],
    x: int,
    repeats: int = DEFAULT_REPEATS,
) -> tuple[object, float]:
    """Run ``search`` ``repeats`` times; return its result and the CPU seconds spent."""
    if repeats < 1:
        raise ValueError("repeats must be at least 1")
    start = time.process_time()
    for _ in range(repeats):
        result = search(values, x)
    return result, time.process_time() - start


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt).strip()
        try:
            return int(text)
        except ValueError:
            prompt = "Valor invalido! Digite um numero inteiro: "


def _clear_screen() -> None:
    if sys.stdout.isatty():
        print("\033[2J\033[H", end="")


def _fill_random(n: int) -> list[int]:
    option = _read_int(
        "\nDeseja inserir numeros numa faixa de valores especifica? [1 - Sim | 2 - Nao]: "
    )
    while option not in (1, 2):
        option = _read_int("Opcao invalida! Digite novamente: ")
    if option == 2:
        return random_values(n)
    while True:
        low = _read_int("Digite o valor minimo: ")
        high = _read_int("Digite o valor maximo: ")
        try:
            return random_values(n, low, high)
        except ValueError:
            print("O valor maximo deve ser maior ou igual ao minimo!")


def _show(title: str, values: Sequence[int]) -> None:
    print(title)
    print(" ".join(str(v) for v in values))


_SORTS: dict[int, Callable[[list[int]], int | None]] = {
    1: counted_bubble_sort,
    2: counted_selection_sort,
    3: counted_insertion_sort,
    4: counted_merge_sort,
    5: middle_pivot_quick_sort,
    6: counted_heap_sort,
}

_SORT_MENU = (
    "1 - Bubble Sort.\n2 - Selection Sort.\n3 - Insertion Sort.\n"
    "4 - Merge Sort.\n5 - Quick Sort.\n6 - Heap Sort."
)


def _session(repeats: int) -> int:
    _clear_screen()
    print("Bem vindo ao programa de ordenacao e busca de vetores!")
    print("Este programa foi desenvolvido para estudo de algoritmos de ordenacao e busca.\n")
    print("Este programa possui:")
    print("2 opcoes de busca: Busca Linear e Busca Binaria.")
    print("6 opcoes de ordenacao: Bubble Sort, Selection Sort, Insertion Sort, "
          "Merge Sort, Quick Sort e Heap Sort.")
    print("3 opcoes de preenchimento do vetor: Numeros sequenciais, Numeros aleatorios e "
          "Numeros digitados pelo usuario (Manualmente).\n")
    print("Alem disso, este programa mede o tempo de execucao de cada algoritmo de busca "
          "(Busca Linear e Busca Binaria).\n")

    n = _read_int("Para comecar, digite o tamanho do vetor: ")
    while n < 1:
        n = _read_int("O tamanho deve ser positivo! Digite novamente: ")

    print("\nComo deseja preencher o vetor?\n")
    print("1 - Numeros sequenciais.\n2 - Numeros aleatorios.\n"
          "3 - Numeros digitados pelo usuario (Manualmente).\n")
    fill = _read_int("Digite a opcao desejada: ")
    if fill == 1:
        values = sequential_values(n)
    elif fill == 2:
        values = _fill_random(n)
    elif fill == 3:
        values = [_read_int(f"\nDigite um valor para a posicao {i}a: ") for i in range(1, n + 1)]
    else:
        print("Opcao invalida!")
        values = [0] * n

    option = _read_int(
        "\nDeseja mostrar o vetor original? Caso seu vetor seja muito grande, talvez seja "
        "melhor nao mostrar. [1 - Sim | 2 - Nao]: "
    )
    if option == 1:
        _show(f"\nValores do vetor original [Tamanho: {n}]: \n", values)

    if fill != 1:
        print("\nPara continuar, o vetor deve ser ordenado!")
        print("Escolha um algoritmo de ordenacao para ordenar o vetor:\n")
        print(_SORT_MENU + "\n")
        sort = _SORTS.get(_read_int("Opcao: "))
        if sort is None:
            print("\nOpcao invalida!")
        else:
            count = sort(values)
            if count is not None:
                print(f"\nQuantidade de vezes que o algoritmo de ordenacao foi executado: {count}")
            print("\nVetor ordenado com sucesso!")
        option = _read_int(
            "\nDeseja mostrar o vetor ordenado? Caso seu vetor seja muito grande, talvez seja "
            "melhor nao mostrar. [1 - Sim | 2 - Nao]: "
        )
        if option == 1:
            _show(f"\nValores do vetor ordenado [Tamanho: {n}]: ", values)
    else:
        print("O vetor ja esta ordenado!")

    x = _read_int(
        f"\nDigite um numero entre {min(values)} e {max(values)} para ser buscado no vetor: "
    )
    for search, name in ((linear_search, "linear"), (binary_search, "binaria")):
        result, seconds = time_search(search, values, x, repeats)
        found = result is not None and result is not False
        print(f"{x} esta presente no vetor." if found else f"{x} nao esta presente no vetor.")
        print(f"Tempo gasto: {seconds:f} segundos com a busca {name}.")

    option = _read_int(
        "\nDeseja saber sobre algum conteudo relacionado a este programa? [1 - Sim | 2 - Nao]: "
    )
    while option == 1:
        print("Sobre o que gostaria de saber?\n")
        print(_SORT_MENU)
        print("7 - Busca Linear.\n8 - Busca Binaria.\n"
              "9 - Diferenca entre Busca Linear e Busca Binaria.\n10 - Tempo logaritmico.\n")
        topic = _read_int("Opcao: ")
        try:
            print(explanation(topic))
        except ValueError:
            print("Opcao invalida!")
        option = _read_int(
            "\nDeseja saber sobre outro conteudo relacionado a este programa? "
            "[1 - Sim | 2 - Nao]: "
        )
    return _read_int("Deseja repetir o programa? [1 - Sim | 0 - Nao]: ")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive sorting and searching study."""
    parser = argparse.ArgumentParser(description="Estudo de ordenacao e busca em vetores.")
    parser.add_argument(
        "--repeats", type=int, default=DEFAULT_REPEATS,
        help="quantas vezes cada busca e repetida ao medir o tempo",
    )
    args = parser.parse_args(argv)
    if args.repeats < 1:
        parser.error("--repeats must be at least 1")
    try:
        while _session(args.repeats) != 0:
            pass
    except EOFError:
        print()
        return 1
    print("\nObrigado por usar o programa!")
    return 0


if __name__ == "__main__":
    sys.exit(main())