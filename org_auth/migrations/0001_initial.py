import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='User',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user_id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('first_name', models.CharField(max_length=150)),
                ('last_name', models.CharField(max_length=150)),
                ('email', models.EmailField(max_length=255, unique=True)),
                ('password', models.CharField(help_text='加盐密码摘要', max_length=255)),
                ('phone', models.CharField(blank=True, max_length=32, null=True)),
            ],
            options={
                'db_table': 'org_auth_user',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Organisation',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('org_id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(help_text='组织名称', max_length=255)),
                ('description', models.TextField(blank=True, help_text='组织描述', null=True)),
                ('members', models.ManyToManyField(db_table='org_auth_membership', help_text='组织成员', related_name='organisations', to='org_auth.user')),
            ],
            options={
                'db_table': 'org_auth_organisation',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='AuditLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('action', models.CharField(db_index=True, help_text='操作类型', max_length=100)),
                ('resource_type', models.CharField(blank=True, help_text='资源类型', max_length=50, null=True)),
                ('resource_id', models.CharField(blank=True, help_text='资源ID', max_length=64, null=True)),
                ('ip_address', models.GenericIPAddressField(blank=True, help_text='IP地址', null=True)),
                ('user_agent', models.TextField(blank=True, help_text='User Agent', null=True)),
                ('metadata', models.JSONField(default=dict, help_text='附加元数据')),
                ('user', models.ForeignKey(blank=True, help_text='操作用户，登录失败且用户不存在时为空', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='audit_logs', to='org_auth.user')),
            ],
            options={
                'db_table': 'org_auth_audit_log',
                'ordering': ['-created_at'],
                'abstract': False,
                'indexes': [models.Index(fields=['resource_type', 'resource_id'], name='org_auth_audit_resource_idx')],
            },
        ),
    ]
