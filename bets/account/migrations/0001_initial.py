import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
    ]

    operations = [
        migrations.CreateModel(
            name='Department',
            fields=[
                ('dept_id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='부서 고유 식별자')),
                ('dept_name', models.CharField(max_length=30, verbose_name='부서 명칭')),
            ],
            options={
                'verbose_name': '부서',
                'verbose_name_plural': '부서',
                'db_table': 'departments',
                'ordering': ['dept_id'],
            },
        ),
        migrations.CreateModel(
            name='User',
            fields=[
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('user_id', models.BigAutoField(primary_key=True, serialize=False, verbose_name='사용자 고유 식별자')),
                ('email', models.EmailField(max_length=50, unique=True, verbose_name='회사 이메일')),
                ('name', models.CharField(max_length=50, verbose_name='성명')),
                ('position', models.CharField(max_length=20, verbose_name='직급')),
                ('role', models.CharField(choices=[('admin', '관리자'), ('manager', '매니저'), ('engineer', '엔지니어')], default='engineer', max_length=20, verbose_name='권한')),
                ('is_active', models.BooleanField(default=True, verbose_name='계정 활성화/퇴사 여부')),
                ('department', models.ForeignKey(blank=True, db_column='dept_id', null=True, on_delete=django.db.models.deletion.PROTECT, related_name='users', to='account.department', verbose_name='소속 부서')),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'verbose_name': '사용자',
                'verbose_name_plural': '사용자',
                'db_table': 'users',
                'ordering': ['user_id'],
            },
        ),
    ]
