"""
Handlers de erro (404/500).

Rotas /api/ recebem JSON; as demais, a página error.html.
"""

import logging

from django.shortcuts import render

from .api import json_response

logger = logging.getLogger(__name__)


def _wants_json(request) -> bool:
    return request.path.startswith('/api/')


def page_not_found(request, exception=None):
    if _wants_json(request):
        return json_response(success=False, error="Recurso não encontrado", status=404)
    return render(
        request,
        'error.html',
        {'status_code': 404, 'message': "Página não encontrada."},
        status=404,
    )


def server_error(request):
    logger.error(f"Erro 500 em {request.path}")
    if _wants_json(request):
        return json_response(success=False, error="Erro interno do servidor", status=500)
    return render(
        request,
        'error.html',
        {'status_code': 500, 'message': "Algo deu errado. Tente novamente mais tarde."},
        status=500,
    )
