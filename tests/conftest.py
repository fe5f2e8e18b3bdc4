import pytest

from housing_regression.data.load_data import load_sample_data
from housing_regression.models.train import Trainer, train_model


@pytest.fixture
def sample_df():
    return load_sample_data()


@pytest.fixture(scope="session")
def sdca_model():
    return train_model(load_sample_data(), trainer=Trainer.SDCA)


@pytest.fixture(scope="session")
def fasttree_model():
    return train_model(load_sample_data(), trainer=Trainer.FAST_TREE)


@pytest.fixture(scope="session", params=[Trainer.SDCA, Trainer.FAST_TREE], ids=lambda t: t.value)
def trained(request, sdca_model, fasttree_model):
    if request.param is Trainer.SDCA:
        return request.param, sdca_model
    return request.param, fasttree_model
