from __future__ import annotations

from jinja2 import Environment, PackageLoader, select_autoescape

NAO_DEFINIDA = "Não definida"
LIMITE_DESCRICAO = 100


def formatar_data(valor: str | None) -> str:
    """'2024-03-05T00:00:00.000Z' -> '05/03/2024'. Sem valor -> 'Não definida'."""
    if not valor:
        return NAO_DEFINIDA
    parte = str(valor)[:10]
    partes = parte.split("-")
    if len(partes) == 3:
        return f"{partes[2]}/{partes[1]}/{partes[0]}"
    return parte


def resumir(texto: str | None, limite: int = LIMITE_DESCRICAO) -> str:
    texto = texto or ""
    if len(texto) <= limite:
        return texto
    return texto[:limite] + "..."


env = Environment(
    loader=PackageLoader("painel_eventos", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)
env.filters["data_br"] = formatar_data
env.filters["resumo"] = resumir


def render(template: str, **ctx) -> str:
    return env.get_template(template).render(**ctx)


def mensagem_html(texto: str, cor: str | None = None) -> str:
    return render("mensagem.html", texto=texto, cor=cor)
