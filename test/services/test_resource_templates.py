import pytest

from core.models import Component, DEFAULT_RUNTIME_IMAGES, ImageStream, ObjectMeta, RuntimeImages
from core.services.resource_templates import (
    build_builder_image,
    build_deployment,
    build_output_image,
    build_pipeline,
)

NAME = "MyComp"
NAMESPACE = "test-project"


@pytest.fixture
def component():
    return Component(name=NAME, namespace=NAMESPACE, build_type="nodejs", codebase="https://somegit.con/myrepo")


@pytest.fixture
def shared_builder():
    return ImageStream(metadata=ObjectMeta(name="nodejs", namespace="openshift"))


def test_builder_image_from_mapping(component):
    builder = build_builder_image(component, DEFAULT_RUNTIME_IMAGES)

    assert builder.name == "nodejs"
    assert builder.namespace == NAMESPACE
    assert builder.metadata.labels == {"app": NAME}
    assert builder.lookup_local is False
    assert len(builder.tags) == 1
    assert builder.tags[0].name == "latest"
    assert builder.tags[0].from_.kind == "DockerImage"
    assert builder.tags[0].from_.name == "nodeshift/centos7-s2i-nodejs:10.x"


@pytest.mark.parametrize("build_type", ["", "cobol"])
def test_builder_image_absent_for_unknown_build_type(build_type):
    component = Component(name=NAME, namespace=NAMESPACE, build_type=build_type)
    assert build_builder_image(component, DEFAULT_RUNTIME_IMAGES) is None


def test_builder_image_uses_injected_mapping():
    component = Component(name=NAME, namespace=NAMESPACE, build_type="python")
    images = RuntimeImages(images={"python": "centos/python-36-centos7"})

    builder = build_builder_image(component, images)

    assert builder.tags[0].from_.name == "centos/python-36-centos7"
    assert build_builder_image(component, DEFAULT_RUNTIME_IMAGES) is None


def test_output_image(component):
    output = build_output_image(component)

    assert output.name == NAME
    assert output.namespace == NAMESPACE
    assert output.metadata.labels == {"app": NAME}
    assert output.tags == []
    assert "tags" not in output.to_manifest()["spec"]


def test_pipeline_with_declared_builder(component):
    builder = build_builder_image(component, DEFAULT_RUNTIME_IMAGES)
    bc = build_pipeline(component, builder)

    assert bc.name == NAME
    assert bc.namespace == NAMESPACE
    assert bc.metadata.labels == {"app": NAME}
    assert bc.source.uri == "https://somegit.con/myrepo"
    assert bc.source.ref == "master"
    assert bc.output_to.kind == "ImageStreamTag"
    assert bc.output_to.name == "MyComp:latest"
    assert bc.strategy_from.kind == "ImageStreamTag"
    assert bc.strategy_from.name == "nodejs:latest"
    assert bc.strategy_from.namespace == NAMESPACE
    assert bc.incremental is True
    assert [t.type for t in bc.triggers] == ["ConfigChange", "ImageChange"]


def test_pipeline_with_shared_builder(component, shared_builder):
    bc = build_pipeline(component, shared_builder)

    assert bc.strategy_from.name == "nodejs:latest"
    assert bc.strategy_from.namespace == "openshift"


def test_pipeline_with_empty_codebase(shared_builder):
    component = Component(name=NAME, namespace=NAMESPACE, build_type="nodejs")
    bc = build_pipeline(component, shared_builder)

    assert bc.source.uri == ""
    assert bc.to_manifest()["spec"]["source"] == {"type": "Git", "git": {"uri": "", "ref": "master"}}


def test_pipeline_manifest(component, shared_builder):
    spec = build_pipeline(component, shared_builder).to_manifest()["spec"]

    assert spec["output"]["to"] == {"kind": "ImageStreamTag", "name": "MyComp:latest"}
    assert spec["strategy"]["type"] == "Source"
    assert spec["strategy"]["sourceStrategy"] == {
        "from": {"kind": "ImageStreamTag", "name": "nodejs:latest", "namespace": "openshift"},
        "incremental": True,
    }
    assert spec["triggers"] == [{"type": "ConfigChange"}, {"type": "ImageChange", "imageChange": {}}]


def test_deployment(component):
    output = build_output_image(component)
    dc = build_deployment(component, output)

    assert dc.name == NAME
    assert dc.namespace == NAMESPACE
    assert dc.metadata.labels == {"app": NAME}
    assert dc.replicas == 1
    assert dc.strategy_type == "Recreate"
    assert dc.selector == {"app": NAME}
    assert dc.template.metadata.labels == {"app": NAME}

    assert len(dc.template.containers) == 1
    container = dc.template.containers[0]
    assert container.name == NAME
    assert container.image == "MyComp:latest"
    assert [(p.container_port, p.protocol) for p in container.ports] == [(8080, "TCP")]

    assert [t.type for t in dc.triggers] == ["ConfigChange", "ImageChange"]
    assert dc.triggers[0].image_change_params is None
    params = dc.triggers[1].image_change_params
    assert params.automatic is True
    assert params.container_names == [NAME]
    assert params.from_.kind == "ImageStreamTag"
    assert params.from_.name == "MyComp:latest"


def test_deployment_manifest(component):
    manifest = build_deployment(component, build_output_image(component)).to_manifest()

    assert manifest["apiVersion"] == "apps.openshift.io/v1"
    assert manifest["kind"] == "DeploymentConfig"
    assert manifest["spec"]["strategy"] == {"type": "Recreate"}
    assert manifest["spec"]["template"]["spec"]["containers"] == [
        {"name": NAME, "image": "MyComp:latest", "ports": [{"containerPort": 8080, "protocol": "TCP"}]}
    ]
    assert manifest["spec"]["triggers"][1] == {
        "type": "ImageChange",
        "imageChangeParams": {
            "automatic": True,
            "containerNames": [NAME],
            "from": {"kind": "ImageStreamTag", "name": "MyComp:latest"},
        },
    }
