from abc import ABC, abstractmethod


class FunctorTest(ABC):
    """
    Laws every functor test case must cover
    """
    @abstractmethod
    def test_equality(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_inequality(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_identity_law(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_composition_law(self, *args):
        raise NotImplementedError()


class MonadTest(FunctorTest, ABC):
    """
    Laws every monad test case must cover in addition to the functor laws
    """
    @abstractmethod
    def test_right_identity_law(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_left_identity_law(self, *args):
        raise NotImplementedError()

    @abstractmethod
    def test_associativity_law(self, *args):
        raise NotImplementedError()
