"""
Result - sucesso ou falha explícitos

Usado onde uma falha deve ser registrada e contornada (variações de nome
de cidade, fontes de fallback) sem try/except aninhados.
"""
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Generic, Iterable, List, Optional, TypeVar, Union

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True)
class Err:
    error: BaseException

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


Result = Union[Ok[T], Err]


def ok(value: T) -> Ok[T]:
    return Ok(value)


def err(error: BaseException) -> Err:
    return Err(error)


def is_ok(result: Result) -> bool:
    return isinstance(result, Ok)


def is_err(result: Result) -> bool:
    return isinstance(result, Err)


def map_result(result: Result, func: Callable[[T], U]) -> Result:
    if isinstance(result, Ok):
        return Ok(func(result.value))
    return result


def unwrap(result: Result) -> Any:
    """Devolve o valor ou relança o erro"""
    if isinstance(result, Ok):
        return result.value
    raise result.error


def match(result: Result, on_ok: Callable[[T], U], on_err: Callable[[BaseException], U]) -> U:
    if isinstance(result, Ok):
        return on_ok(result.value)
    return on_err(result.error)


async def capture(factory: Callable[[], Awaitable[T]]) -> Result:
    """Executa a corrotina e converte exceção em Err"""
    try:
        return Ok(await factory())
    except Exception as e:
        return Err(e)


@dataclass
class FirstSuccess(Generic[T]):
    """Resultado de first_success: valor vencedor e falhas acumuladas"""
    result: Optional[Result] = None
    failures: List[BaseException] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return isinstance(self.result, Ok)


async def first_success(
    attempts: Iterable[Callable[[], Awaitable[T]]],
    on_failure: Optional[Callable[[int, BaseException], None]] = None
) -> FirstSuccess:
    """
    Avalia tentativas em ordem e para na primeira que der certo

    Args:
        attempts: Fábricas de corrotinas (avaliadas preguiçosamente)
        on_failure: Callback (índice, erro) para cada tentativa falha

    Returns:
        FirstSuccess com o Ok vencedor ou o último Err
    """
    outcome = FirstSuccess()
    for index, attempt in enumerate(attempts):
        result = await capture(attempt)
        if isinstance(result, Ok):
            outcome.result = result
            return outcome
        outcome.failures.append(result.error)
        outcome.result = result
        if on_failure is not None:
            on_failure(index, result.error)
    return outcome
