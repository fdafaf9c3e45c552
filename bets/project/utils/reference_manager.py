# utils/reference_manager.py

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from log_events.models import ProjectLogEntry
from work.models import WorkLog
from ..models import Client, Project, ManagerContact, Product


class ReferenceManager:
    """
    고객사 / 프로젝트 / 담당자 / 제품 조회와 삭제 가드를 전담하는 매니저 클래스

    - 고객사, 프로젝트는 is_deleted 로 논리 삭제합니다.
    - 담당자, 제품은 물리 삭제합니다.
    - 작업 로그가 참조 중인 데이터는 삭제하지 않습니다.
    """

    # --------------------------------------------------
    # 고객사
    # --------------------------------------------------
    @classmethod
    def get_client(cls, client_id):
        try:
            return Client.objects.get(pk=client_id, is_deleted=False)
        except Client.DoesNotExist:
            raise NotFound('고객사를 찾을 수 없습니다.')

    @classmethod
    @transaction.atomic
    def delete_client(cls, client_id, actor=None):
        client = cls.get_client(client_id)

        # 살아있는 프로젝트 중 하나라도 작업 로그가 있으면 거부
        for project in client.projects.filter(is_deleted=False):
            if WorkLog.objects.filter(project=project).exists():
                raise ValidationError({
                    'detail': f'해당 고객사의 프로젝트({project.project_name})에 작업 로그가 존재하여 삭제할 수 없습니다. 프로젝트를 먼저 정리해 주세요.'
                })

        # 소속 프로젝트도 함께 논리 삭제
        client.projects.update(is_deleted=True)
        client.is_deleted = True
        client.save(update_fields=['is_deleted'])

        ProjectLogEntry.record(
            app_name='project',
            event_type='CLIENT_DELETED',
            message=f'고객사 삭제: {client.client_name} (client_id={client.pk})',
            user=actor,
        )

    # --------------------------------------------------
    # 프로젝트
    # --------------------------------------------------
    @classmethod
    def project_queryset(cls):
        return (
            Project.objects
            .filter(is_deleted=False)
            .select_related('client', 'department')
            .prefetch_related('contacts')
        )

    @classmethod
    def get_project(cls, project_id):
        try:
            return cls.project_queryset().get(pk=project_id)
        except Project.DoesNotExist:
            raise NotFound('프로젝트를 찾을 수 없습니다.')

    @classmethod
    @transaction.atomic
    def delete_project(cls, project_id, actor=None):
        project = cls.get_project(project_id)

        if WorkLog.objects.filter(project=project).exists():
            raise ValidationError({'detail': '해당 프로젝트에 작업 로그가 존재하여 삭제할 수 없습니다.'})

        project.is_deleted = True
        project.save(update_fields=['is_deleted'])

        ProjectLogEntry.record(
            app_name='project',
            event_type='PROJECT_DELETED',
            message=f'프로젝트 삭제: {project.project_name} (project_id={project.pk})',
            user=actor,
        )

    # --------------------------------------------------
    # 고객사 담당자
    # --------------------------------------------------
    @classmethod
    def get_contact(cls, contact_id):
        try:
            return ManagerContact.objects.get(pk=contact_id)
        except ManagerContact.DoesNotExist:
            raise NotFound('담당자를 찾을 수 없습니다.')

    @classmethod
    def contacts_of(cls, project_id):
        project = cls.get_project(project_id)
        return project.contacts.order_by('contact_id')

    @classmethod
    @transaction.atomic
    def delete_contact(cls, contact_id):
        contact = cls.get_contact(contact_id)

        if WorkLog.objects.filter(contact=contact).exists():
            raise ValidationError({'detail': '해당 담당자에 연관된 작업 로그가 존재하여 삭제할 수 없습니다.'})

        contact.delete()

    # --------------------------------------------------
    # 제품
    # --------------------------------------------------
    @classmethod
    def get_product(cls, product_id):
        try:
            return Product.objects.get(pk=product_id)
        except Product.DoesNotExist:
            raise NotFound('제품을 찾을 수 없습니다.')

    @classmethod
    def grouped_products(cls):
        """
        제품 유형별로 묶은 목록을 반환합니다.

        Returns:
            (products, {product_type: [Product, ...]})
        """
        products = list(Product.objects.order_by('product_type', 'product_name'))
        grouped = {}
        for product in products:
            grouped.setdefault(product.product_type, []).append(product)
        return products, grouped
