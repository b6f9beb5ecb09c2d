"""
Testes das Views HTML.

Testa:
- Login, cadastro e logout dos três papéis
- Proteção dos painéis por papel
- Ações POST dos painéis (redirect + flash message)
"""

from datetime import date

import pytest
from django.contrib.messages import get_messages
from django.test import Client
from django.urls import reverse

from src.adapters.django_app.adoptions.models import PetModel, AdoptionModel
from src.adapters.django_app.audit.models import ActionLogModel

from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD, DEFAULT_PASSWORD


pytestmark = pytest.mark.django_db


def flash(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


# =============================================================================
# Contas
# =============================================================================

class TestHomeView:

    def test_home_anonima(self, client):
        response = client.get('/')

        assert response.status_code == 200
        assert 'accounts/home.html' in [t.name for t in response.templates]

    def test_home_redireciona_logado(self, logged_client):
        response = logged_client.get('/')

        assert response.status_code == 302
        assert response.url == reverse('adoptions:client_dashboard')


class TestLoginViews:

    @pytest.mark.parametrize('url', ['/client/login/', '/shelter/login/', '/admin/login/'])
    def test_formulario(self, client, url):
        response = client.get(url)

        assert response.status_code == 200
        assert 'form' in response.context

    def test_login_cliente(self, client, client_account):
        response = client.post('/client/login/', {
            'email': 'maria@example.com',
            'password': DEFAULT_PASSWORD,
        })

        assert response.status_code == 302
        assert response.url == reverse('adoptions:client_dashboard')
        assert client.session['account']['role'] == 'client'
        assert 'Bem-vindo(a), Maria Silva!' in flash(response)

    def test_login_abrigo(self, client, shelter_account):
        response = client.post('/shelter/login/', {
            'email': 'abrigo@patinhas.org',
            'password': DEFAULT_PASSWORD,
        })

        assert response.status_code == 302
        assert response.url == reverse('adoptions:shelter_dashboard')

    def test_login_admin(self, client):
        response = client.post('/admin/login/', {'email': ADMIN_EMAIL, 'password': ADMIN_PASSWORD})

        assert response.status_code == 302
        assert response.url == reverse('audit:admin_dashboard')

    def test_senha_errada(self, client, client_account):
        response = client.post('/client/login/', {
            'email': 'maria@example.com',
            'password': 'errada-demais',
        })

        assert response.status_code == 302
        assert response.url == reverse('accounts:client_login')
        assert 'account' not in client.session

    def test_cliente_nao_entra_como_abrigo(self, client, client_account):
        response = client.post('/shelter/login/', {
            'email': 'maria@example.com',
            'password': DEFAULT_PASSWORD,
        })

        assert response.url == reverse('accounts:shelter_login')
        assert 'account' not in client.session

    def test_login_registra_acao(self, client, client_account):
        client.post('/client/login/', {'email': 'maria@example.com', 'password': DEFAULT_PASSWORD})

        assert ActionLogModel.objects.filter(
            table_name='client', action_type='LOGIN', record_id=client_account.id
        ).exists()


class TestRegisterViews:

    def test_cadastro_cliente(self, client):
        response = client.post('/client/register/', {
            'full_name': 'Pedro Lima',
            'email': 'Pedro@Example.com',
            'password': DEFAULT_PASSWORD,
        })

        assert response.status_code == 302
        assert response.url == reverse('accounts:client_login')
        assert ActionLogModel.objects.filter(table_name='client', action_type='REGISTER').count() == 1

    def test_cadastro_abrigo(self, client):
        response = client.post('/shelter/register/', {
            'shelter_name': 'Abrigo Novo',
            'email': 'novo@abrigo.org',
            'password': DEFAULT_PASSWORD,
            'location': 'Recife',
        })

        assert response.status_code == 302
        assert response.url == reverse('accounts:shelter_login')

    def test_email_duplicado(self, client, client_account):
        response = client.post('/client/register/', {
            'full_name': 'Outra Maria',
            'email': 'maria@example.com',
            'password': DEFAULT_PASSWORD,
        })

        assert response.status_code == 409
        assert response.context['form'].errors

    def test_senha_curta(self, client):
        response = client.post('/client/register/', {
            'full_name': 'Pedro Lima',
            'email': 'pedro@example.com',
            'password': '123',
        })

        assert response.status_code == 400


class TestLogoutView:

    def test_logout(self, logged_client, client_account):
        response = logged_client.post('/logout/')

        assert response.status_code == 302
        assert response.url == reverse('accounts:home')
        assert 'account' not in logged_client.session
        assert ActionLogModel.objects.filter(action_type='LOGOUT', record_id=client_account.id).exists()

    def test_logout_sem_sessao(self, client):
        response = client.post('/logout/')

        assert response.status_code == 302
        assert not ActionLogModel.objects.filter(action_type='LOGOUT').exists()


# =============================================================================
# Painéis
# =============================================================================

class TestDashboards:

    def test_painel_exige_login(self, client):
        response = client.get('/client/dashboard/')

        assert response.status_code == 302
        assert response.url == reverse('accounts:client_login')
        assert 'Faça login para continuar.' in flash(response)

    def test_abrigo_nao_acessa_painel_do_cliente(self, logged_shelter):
        response = logged_shelter.get('/client/dashboard/')

        assert response.status_code == 302
        assert response.url == reverse('accounts:client_login')

    def test_cliente_nao_acessa_painel_admin(self, logged_client):
        response = logged_client.get('/admin/dashboard/')

        assert response.status_code == 302
        assert response.url == reverse('accounts:admin_login')

    def test_painel_do_cliente(self, logged_client, available_pet):
        response = logged_client.get('/client/dashboard/')

        assert response.status_code == 200
        assert [p.name for p in response.context['pets']] == ['Rex']
        assert response.context['adoptions'] == []

    def test_painel_do_cliente_com_busca(self, logged_client, available_pet):
        response = logged_client.get('/client/dashboard/', {'search': 'gato'})

        assert response.status_code == 200
        assert response.context['pets'] == []
        assert response.context['search'] == 'gato'

    def test_busca_longa_demais(self, logged_client, available_pet):
        response = logged_client.get('/client/dashboard/', {'search': 'x' * 101})

        assert response.status_code == 200
        assert response.context['search'] == ''
        assert 'Busca deve ter no máximo 100 caracteres' in flash(response)

    def test_painel_do_abrigo(self, logged_shelter, available_pet):
        response = logged_shelter.get('/shelter/dashboard/')

        assert response.status_code == 200
        assert [p.id for p in response.context['pets']] == [available_pet.id]
        assert response.context['pending_count'] == 0

    def test_painel_admin(self, logged_admin, client_account, shelter_account):
        response = logged_admin.get('/admin/dashboard/')

        assert response.status_code == 200
        assert len(response.context['clients']) == 1
        assert len(response.context['shelters']) == 1
        assert response.context['entries']

    def test_sessao_de_conta_removida_e_descartada(self, logged_client, client_account):
        from src.adapters.django_app.accounts.models import ClientModel
        ClientModel.objects.filter(id=client_account.id).delete()

        response = logged_client.get('/client/dashboard/')

        assert response.status_code == 302
        assert response.url == reverse('accounts:client_login')


# =============================================================================
# Ações dos painéis
# =============================================================================

class TestShelterActions:

    def test_cadastrar_pet(self, logged_shelter, shelter_account):
        response = logged_shelter.post('/pet/add/', {
            'name': 'Mimi',
            'species': 'Cat',
            'breed': 'Siamês',
            'age': '2',
            'gender': 'Female',
        })

        assert response.status_code == 302
        assert response.url == reverse('adoptions:shelter_dashboard')
        assert 'Mimi cadastrado com sucesso!' in flash(response)
        pet = PetModel.objects.get(name='Mimi')
        assert pet.shelter_id == shelter_account.id
        assert pet.status == 'Available'

    def test_cadastrar_pet_sem_nome(self, logged_shelter):
        response = logged_shelter.post('/pet/add/', {'species': 'Cat'})

        assert response.status_code == 302
        assert not PetModel.objects.exists()
        assert flash(response)

    def test_remover_pet(self, logged_shelter, available_pet):
        response = logged_shelter.post('/pet/delete/', {'pet_id': available_pet.id})

        assert 'Pet removido.' in flash(response)
        assert not PetModel.objects.filter(id=available_pet.id).exists()

    def test_pet_de_outro_abrigo_nao_encontrado(self, other_shelter_account, available_pet):
        http = Client()
        http.post('/shelter/login/', {'email': other_shelter_account.email, 'password': DEFAULT_PASSWORD})

        response = http.post('/pet/delete/', {'pet_id': available_pet.id})

        assert response.status_code == 302
        assert PetModel.objects.filter(id=available_pet.id).exists()
        assert flash(response)

    def test_marcar_adotado(self, logged_shelter, available_pet):
        response = logged_shelter.post('/pet/mark-adopted/', {'pet_id': available_pet.id})

        assert 'Rex marcado como adotado.' in flash(response)
        assert PetModel.objects.get(id=available_pet.id).status == 'Adopted'

    def test_cliente_nao_cadastra_pet(self, logged_client):
        response = logged_client.post('/pet/add/', {'name': 'Mimi', 'species': 'Cat'})

        assert response.status_code == 302
        assert response.url == reverse('accounts:shelter_login')
        assert not PetModel.objects.exists()


class TestClientActions:

    def test_solicitar_adocao(self, logged_client, available_pet, client_account):
        response = logged_client.post('/adoption/request/', {
            'pet_id': available_pet.id,
            'client_reason': 'Tenho quintal grande',
        })

        assert response.status_code == 302
        assert response.url == reverse('adoptions:client_dashboard')
        assert 'Solicitação de adoção enviada!' in flash(response)
        adoption = AdoptionModel.objects.get(pet_id=available_pet.id)
        assert adoption.client_id == client_account.id
        assert adoption.status == 'Pending'
        assert PetModel.objects.get(id=available_pet.id).status == 'Available'

    def test_solicitacao_duplicada(self, logged_client, available_pet):
        logged_client.post('/adoption/request/', {'pet_id': available_pet.id})

        response = logged_client.post('/adoption/request/', {'pet_id': available_pet.id})

        assert AdoptionModel.objects.filter(pet_id=available_pet.id).count() == 1
        assert flash(response)

    def test_cancelar(self, logged_client, available_pet):
        logged_client.post('/adoption/request/', {'pet_id': available_pet.id})
        adoption = AdoptionModel.objects.get(pet_id=available_pet.id)

        response = logged_client.post('/adoption/cancel/', {'adoption_id': adoption.id})

        assert 'Solicitação cancelada.' in flash(response)
        adoption.refresh_from_db()
        assert adoption.status == 'Cancelled'


class TestShelterAdoptionActions:

    @pytest.fixture
    def pending(self, services, client_account, available_pet):
        from src.core.adoptions.dtos import RequestAdoptionInputDTO

        return services.request_adoption_service().execute(
            RequestAdoptionInputDTO(pet_id=available_pet.id, client_id=client_account.id)
        )

    @pytest.fixture
    def approved(self, logged_shelter, pending):
        logged_shelter.post('/adoption/approve/', {'adoption_id': pending.id})
        return pending

    def test_aprovar(self, logged_shelter, pending, available_pet):
        response = logged_shelter.post('/adoption/approve/', {
            'adoption_id': pending.id,
            'shelter_response': 'Venha no sábado',
            'visit_date': '2030-01-10',
        })

        assert response.status_code == 302
        assert response.url == reverse('adoptions:shelter_dashboard')
        assert 'Solicitação aprovada. O pet está em espera.' in flash(response)
        adoption = AdoptionModel.objects.get(id=pending.id)
        assert adoption.status == 'Approved'
        assert adoption.shelter_response == 'Venha no sábado'
        assert PetModel.objects.get(id=available_pet.id).status == 'Hold'

    def test_aprovar_com_data_e_hora(self, logged_shelter, pending):
        response = logged_shelter.post('/adoption/approve/', {
            'adoption_id': pending.id,
            'visit_date': '2030-01-10T10:00:00',
        })

        assert 'Solicitação aprovada. O pet está em espera.' in flash(response)
        assert AdoptionModel.objects.get(id=pending.id).visit_date == date(2030, 1, 10)

    def test_aprovar_data_invalida(self, logged_shelter, pending):
        response = logged_shelter.post('/adoption/approve/', {
            'adoption_id': pending.id,
            'visit_date': '10/01/2030',
        })

        assert 'Data da visita inválida' in flash(response)
        assert AdoptionModel.objects.get(id=pending.id).status == 'Pending'

    def test_outro_abrigo_nao_aprova(self, other_shelter_account, pending, available_pet):
        http = Client()
        http.post('/shelter/login/', {'email': other_shelter_account.email, 'password': DEFAULT_PASSWORD})

        response = http.post('/adoption/approve/', {'adoption_id': pending.id})

        assert response.status_code == 302
        assert f'Solicitação {pending.id} não encontrada' in flash(response)
        assert AdoptionModel.objects.get(id=pending.id).status == 'Pending'
        assert PetModel.objects.get(id=available_pet.id).status == 'Available'

    def test_recusar(self, logged_shelter, pending, available_pet):
        response = logged_shelter.post('/adoption/reject/', {
            'adoption_id': pending.id,
            'shelter_response': 'Perfil não compatível',
        })

        assert 'Solicitação recusada.' in flash(response)
        adoption = AdoptionModel.objects.get(id=pending.id)
        assert adoption.status == 'Rejected'
        assert adoption.shelter_response == 'Perfil não compatível'
        assert PetModel.objects.get(id=available_pet.id).status == 'Available'

    def test_concluir_adocao(self, logged_shelter, approved, available_pet):
        response = logged_shelter.post('/adoption/finalize/', {
            'adoption_id': approved.id,
            'outcome': 'Adopted',
            'completion_date': '2030-01-20T18:30:00',
        })

        assert 'Adoção concluída!' in flash(response)
        adoption = AdoptionModel.objects.get(id=approved.id)
        assert adoption.status == 'Completed'
        assert adoption.completion_date == date(2030, 1, 20)
        assert PetModel.objects.get(id=available_pet.id).status == 'Adopted'

    def test_devolver_pet(self, logged_shelter, approved, available_pet):
        response = logged_shelter.post('/adoption/finalize/', {
            'adoption_id': approved.id,
            'outcome': 'Available',
        })

        assert 'Pet devolvido e disponível novamente.' in flash(response)
        assert AdoptionModel.objects.get(id=approved.id).status == 'Rejected'
        assert PetModel.objects.get(id=available_pet.id).status == 'Available'

    def test_finalizar_pendente(self, logged_shelter, pending):
        response = logged_shelter.post('/adoption/finalize/', {
            'adoption_id': pending.id,
            'outcome': 'Adopted',
        })

        assert response.status_code == 302
        assert flash(response)
        assert AdoptionModel.objects.get(id=pending.id).status == 'Pending'
