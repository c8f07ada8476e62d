# -*- coding: utf-8 -*-
import unittest

from uconline.config import ini
from uconline.config.store.base import ConfigStore


SAMPLE = """\
; leading comment
[uc-online]
AppID = 730
  GameExecutable   =   .\\Game\\Binaries\\Win64\\Game.exe  
# another comment
GameArguments = -game hl1 -windowed

[Logging]
EnableLogging=false
LogFile = logs/uc online.log
"""


class ParseTest(unittest.TestCase):

    def testSample(self):
        store = ini.parse(SAMPLE)
        self.assertEqual(store.list_sections(), ['uc-online', 'Logging'])
        self.assertEqual(store.list_keys('uc-online'), ['AppID', 'GameExecutable', 'GameArguments'])
        self.assertEqual(store.get_value('uc-online', 'GameExecutable'), '.\\Game\\Binaries\\Win64\\Game.exe')
        self.assertEqual(store.get_value('uc-online', 'GameArguments'), '-game hl1 -windowed')
        self.assertEqual(store.get_value('Logging', 'EnableLogging'), 'false')
        self.assertEqual(store.get_value('Logging', 'LogFile'), 'logs/uc online.log')

    def testCaseInsensitive(self):
        store = ini.parse(SAMPLE)
        self.assertEqual(store.get_value('UC-ONLINE', 'appid', ''), '730')
        self.assertEqual(store.get_value('logging', 'LOGFILE', ''), 'logs/uc online.log')

    def testLastDuplicateWins(self):
        store = ini.parse("[s]\nAppID = 100\nAppID = 200\n")
        self.assertEqual(store.get_value('s', 'AppID'), '200')

    def testReopenedSectionMerges(self):
        store = ini.parse("[s]\nAppID = 100\nOther = x\n[t]\na = 1\n[S]\nappid = 200\n")
        self.assertEqual(store.list_sections(), ['s', 't'])
        self.assertEqual(store.list_keys('s'), ['AppID', 'Other'])
        self.assertEqual(store.get_value('s', 'AppID'), '200')

    def testMalformedLinesSkipped(self):
        store = ini.parse("orphan = 1\n=novalue\n[s]\n= 2\nnoequals\n  ;comment = 3\nok = 4\n")
        self.assertEqual(store.list_sections(), ['s'])
        self.assertEqual(list(store.items()), [('s', 'ok', '4')])

    def testValueSplitsOnFirstEquals(self):
        store = ini.parse("[s]\nargs = -a=1 -b=[2]\nempty =\n")
        self.assertEqual(store.get_value('s', 'args'), '-a=1 -b=[2]')
        self.assertEqual(store.get_value('s', 'empty', None), '')

    def testSectionNameKeptVerbatim(self):
        store = ini.parse("[ spaced name ]\nk = v\n")
        self.assertEqual(store.list_sections(), [' spaced name '])
        self.assertEqual(store.get_value(' SPACED NAME ', 'k'), 'v')

    def testEmptySectionHeader(self):
        store = ini.parse("[]\nk = v\n[s]\n")
        self.assertEqual(store.list_sections(), ['', 's'])
        self.assertEqual(store.list_keys(''), [])
        self.assertEqual(store.list_keys('s'), [])

    def testLineEndingsAndBom(self):
        store = ini.parse("\ufeff[s]\r\na = 1\r\nb = 2\r\n")
        self.assertEqual(list(store.items()), [('s', 'a', '1'), ('s', 'b', '2')])

    def testOnlyNewlinesEndLines(self):
        store = ini.parse("[s]\nArgs = -a\x0c-b\nSep = x\x1cy\x85z\u2028w\nOld = \rMac = 1\r")
        self.assertEqual(store.get_value('s', 'Args'), '-a\x0c-b')
        self.assertEqual(store.get_value('s', 'Sep'), 'x\x1cy\x85z\u2028w')
        self.assertEqual(store.get_value('s', 'Mac'), '1')
        self.assertEqual(store.list_keys('s'), ['Args', 'Sep', 'Old', 'Mac'])

    def testParseIntoExistingStore(self):
        store = ConfigStore()
        store.set_value('keep', 'k', 'v')
        rv = ini.parse("[s]\na = 1\n", store)
        self.assertIs(rv, store)
        self.assertEqual(store.list_sections(), ['keep', 's'])

    def testNeverRaises(self):
        junk = "[[[\n]]]\n[\n=\n==\n[a]b]\n\x00\x01 = \x02\n[x\n"
        store = ini.parse(junk)
        self.assertIsInstance(store, ConfigStore)


class SerializeTest(unittest.TestCase):

    def testFormat(self):
        store = ConfigStore()
        store.set_value('uc-online', 'AppID', '730')
        store.set_value('uc-online', 'GameArguments', '')
        store.set_value('Logging', 'EnableLogging', True)
        self.assertEqual(
            ini.serialize(store),
            "[uc-online]\nAppID = 730\nGameArguments = \n\n"
            "[Logging]\nEnableLogging = true\n\n"
        )

    def testEmptySection(self):
        store = ConfigStore()
        store.add_section('Empty')
        self.assertEqual(ini.serialize(store), "[Empty]\n\n")
        self.assertEqual(ini.serialize(ConfigStore()), "")

    def testKeepsFirstCasing(self):
        store = ini.parse("[uc-online]\nAppID = 480\n")
        store.set_value('UC-ONLINE', 'appid', '730')
        self.assertEqual(ini.serialize(store), "[uc-online]\nAppID = 730\n\n")

    def testRoundTrip(self):
        store = ini.parse(SAMPLE)
        text = ini.serialize(store)
        again = ini.parse(text)
        self.assertEqual(store, again)
        self.assertEqual(list(store.items()), list(again.items()))
        self.assertEqual(ini.serialize(again), text)

    def testRoundTripUnicodeBreaksInValues(self):
        store = ConfigStore()
        store.set_value('s', 'k', 'a\x85b')
        store.set_value('s', 'ff', 'a\x0cb\u2029c')
        self.assertEqual(ini.parse(ini.serialize(store)), store)

    def testRoundTripDropsComments(self):
        text = ini.serialize(ini.parse(SAMPLE))
        self.assertNotIn(';', text)
        self.assertNotIn('#', text)


class DefaultDocumentTest(unittest.TestCase):

    def testIdempotent(self):
        self.assertEqual(ini.default_document(), ini.default_document())

    def testContents(self):
        store = ini.default_store()
        self.assertEqual(store.list_sections(), ['uc-online', 'Logging'])
        self.assertEqual(
            store.list_keys('uc-online'),
            ['AppID', 'GameExecutable', 'GameArguments', 'SteamAppIdFile', 'SteamApiDLLPath'])
        self.assertEqual(store.get_value('uc-online', 'AppID'), '480')
        self.assertEqual(store.get_value('uc-online', 'GameExecutable', None), '')
        self.assertEqual(store.get_value('uc-online', 'GameArguments', None), '')
        self.assertEqual(store.get_value('uc-online', 'SteamAppIdFile'), 'steam_appid.txt')
        self.assertEqual(store.get_value('uc-online', 'SteamApiDLLPath', None), '')
        self.assertEqual(store.get_value('Logging', 'EnableLogging'), 'true')
        self.assertEqual(store.get_value('Logging', 'LogFile'), 'uc-online.log')

    def testCommented(self):
        doc = ini.default_document()
        self.assertTrue(doc.startswith("[uc-online]\n; "))
        self.assertIn("\nAppID = 480\n", doc)
        self.assertIn("\nSteamApiDLLPath = \n", doc)
        self.assertTrue(doc.endswith("LogFile = uc-online.log\n"))
