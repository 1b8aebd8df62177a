import unittest

from akeneo_connector.executor import JobExecutor
from akeneo_connector.history import RunHistory
from akeneo_connector.service import service
from akeneo_connector.service.registry import registerServices
from akeneo_connector.state import appState


class SvcBase(object):
    @staticmethod
    def new():
        raise NotImplementedError

    def api(self, arg):
        raise NotImplementedError


class Svc1(SvcBase):
    @staticmethod
    def new():
        return Svc1()

    def api(self, arg):
        return 'service1:{}'.format(arg)


class Svc2(SvcBase):
    @staticmethod
    def new():
        return Svc2()

    def api(self, arg):
        return 'service2:{}'.format(arg)


class ServiceTest(unittest.TestCase):
    def setUp(self):
        service().clear(thisIsATest=True)

    def testSingle(self):
        service().register('service', Svc1)
        svc = service().service.new()
        self.assertEqual('service1:foo', svc.api('foo'))

    def testRegisterTwice(self):
        service().register('service', Svc1)
        service().register('service', Svc1)
        with self.assertRaises(AssertionError):
            service().register('service', Svc2)

    def testScoped(self):
        service().register('s.one', Svc1)
        service().register('s.two', Svc2)
        self.assertEqual('service1:x', service().s.one.new().api('x'))
        self.assertEqual('service2:x', service().s.two.new().api('x'))

    def testMissing(self):
        with self.assertRaises(AttributeError):
            service().nothing  # pylint: disable=pointless-statement


class RegisterServicesTest(unittest.TestCase):
    def testDefaults(self):
        registerServices(testing=True)
        self.assertIs(JobExecutor, service().connector.executor)
        self.assertIs(RunHistory, service().connector.history)
        self.assertIs(appState(), service().app.state())

    def testIdempotent(self):
        registerServices(testing=True)
        registerServices()
