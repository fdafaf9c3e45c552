from django.db import models

from account.models import Department


# client 모델 (고객사)
class Client(models.Model):
    client_id = models.BigAutoField(
        primary_key=True,
        verbose_name='고객사 고유 식별자'
    )
    client_name = models.CharField(
        verbose_name='고객사 명칭',
        max_length=100
    )
    # 논리적 삭제 여부
    is_deleted = models.BooleanField(
        verbose_name='삭제 여부',
        default=False
    )

    class Meta:
        verbose_name = '고객사'
        verbose_name_plural = '고객사'
        db_table = 'client'
        ordering = ['client_id']

    def __str__(self):
        return self.client_name


# projects 모델
class Project(models.Model):
    """
    고객사와 담당 부서를 연결하는 계약 단위입니다.
    작업 로그가 연결된 프로젝트는 삭제할 수 없습니다.
    """
    project_id = models.BigAutoField(
        primary_key=True,
        verbose_name='프로젝트 고유 식별자'
    )
    client = models.ForeignKey(
        Client,
        on_delete=models.PROTECT,
        related_name='projects',
        db_column='client_id',
        verbose_name='고객사'
    )
    department = models.ForeignKey(
        Department,
        on_delete=models.PROTECT,
        related_name='projects',
        db_column='dept_id',
        verbose_name='담당 부서'
    )
    project_name = models.CharField(
        verbose_name='프로젝트 명칭',
        max_length=100
    )
    # 계약 기간 (문구 그대로 저장. 예: 2025.01 ~ 2025.12)
    contract_period = models.CharField(
        verbose_name='계약 기간',
        max_length=100
    )
    is_deleted = models.BooleanField(
        verbose_name='삭제 여부',
        default=False
    )

    class Meta:
        verbose_name = '프로젝트'
        verbose_name_plural = '프로젝트'
        db_table = 'projects'
        ordering = ['project_id']

    def __str__(self):
        return self.project_name


# manager_contacts 모델 (고객사 담당자)
class ManagerContact(models.Model):
    contact_id = models.BigAutoField(
        primary_key=True,
        verbose_name='고객사 담당자 고유 식별자'
    )
    project = models.ForeignKey(
        Project,
        on_delete=models.PROTECT,
        related_name='contacts',
        db_column='project_id',
        verbose_name='소속 프로젝트'
    )
    name = models.CharField(
        verbose_name='요청자 성명',
        max_length=50
    )
    email = models.EmailField(
        verbose_name='요청자 이메일',
        max_length=100
    )
    phone = models.CharField(
        verbose_name='요청자 연락처',
        max_length=20
    )

    class Meta:
        verbose_name = '고객사 담당자'
        verbose_name_plural = '고객사 담당자'
        db_table = 'manager_contacts'
        ordering = ['contact_id']

    def __str__(self):
        return f'{self.name} ({self.email})'


# products 모델 (제품 마스터)
class Product(models.Model):
    product_id = models.BigAutoField(
        primary_key=True,
        verbose_name='제품 식별자'
    )
    # 제품 유형 (DB, OS, WEB, Network 등)
    product_type = models.CharField(
        verbose_name='제품 유형',
        max_length=50
    )
    # 제품명 (Oracle, Tibero, CentOS 등)
    product_name = models.CharField(
        verbose_name='제품명',
        max_length=100
    )

    class Meta:
        verbose_name = '제품'
        verbose_name_plural = '제품'
        db_table = 'products'
        ordering = ['product_type', 'product_name']
        constraints = [
            models.UniqueConstraint(
                fields=['product_type', 'product_name'],
                name='uniq_product_type_name'
            ),
        ]

    def __str__(self):
        return f'[{self.product_type}] {self.product_name}'
