import pytest
import sys
import os

import pulumi

# Add the Pulumi program directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'iac'))

PROJECT = 'video-converter'

DEFAULT_VPC_ID = 'vpc-0default'
DEFAULT_SUBNET_IDS = ['subnet-0aaa', 'subnet-0bbb', 'subnet-0ccc']
UBUNTU_AMI_ID = 'ami-0ubuntujammy'


class AwsMocks(pulumi.runtime.Mocks):
    """Fake AWS: records every declared resource and answers the lookups."""

    def __init__(self, subnet_ids=None):
        self.resources = []
        self.calls = []
        self.subnet_ids = DEFAULT_SUBNET_IDS if subnet_ids is None else subnet_ids

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs = dict(args.inputs)
        if args.typ == 'aws:lb/loadBalancer:LoadBalancer':
            outputs['dnsName'] = f'{args.name}-123456.us-east-1.elb.amazonaws.com'
        if args.typ.startswith('aws:lb/'):
            outputs['arn'] = f'arn:aws:elasticloadbalancing:us-east-1:123456789012:{args.name}'
        return [f'{args.name}_id', outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        self.calls.append(args)
        if args.token == 'aws:ec2/getVpc:getVpc':
            return {'id': DEFAULT_VPC_ID, 'default': True, 'cidrBlock': '172.31.0.0/16'}
        if args.token == 'aws:ec2/getSubnets:getSubnets':
            return {'id': 'us-east-1', 'ids': self.subnet_ids}
        if args.token == 'aws:ec2/getAmi:getAmi':
            return {'id': UBUNTU_AMI_ID, 'architecture': 'x86_64'}
        return {}

    def of_type(self, typ):
        return [r for r in self.resources if r.typ == typ]

    def named(self, name):
        matches = [r for r in self.resources if r.name == name]
        assert len(matches) == 1, f'expected one resource named {name}, got {len(matches)}'
        return matches[0]

    def call_for(self, token):
        return [c for c in self.calls if c.token == token]


@pytest.fixture
def aws_mocks():
    mocks = AwsMocks()
    pulumi.runtime.set_mocks(mocks, project=PROJECT, stack='test', preview=False)
    yield mocks
    pulumi.runtime.set_all_config({})


@pytest.fixture
def sample_stack_config():
    return {
        f'{PROJECT}:appRepoUrl': 'https://example.com/app.git',
    }


@pytest.fixture
def deployment_config():
    from converter_infra.config import DeploymentConfig
    return DeploymentConfig(app_repo_url='https://example.com/app.git')
