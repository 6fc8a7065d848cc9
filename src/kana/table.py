"""音素ペアからカタカナ断片への対応表。"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

# 後続音素が無い（語末・単独）ことを表すキー。
ISOLATED: Final = None

VOWELS: Final[frozenset[str]] = frozenset(
    {
        "AA",
        "AH",
        "AE",
        "AW",
        "AY",
        "ER",
        "IY",
        "IH",
        "UH",
        "UW",
        "EH",
        "EY",
        "AO",
        "OW",
        "OY",
    }
)

# 子音・半母音は後続母音との組み合わせ、母音は後続母音との連続を表す。
_DIGRAPHS: dict[str, dict[str | None, str]] = {
    "ZH": {
        "AA": "ジャ",
        "AH": "ジョ",
        "AE": "ジャ",
        "AW": "ジャ",
        "AY": "ジャイ",
        "ER": "ジェ",
        "IY": "ジ",
        "IH": "ジ",
        "UH": "ジュ",
        "UW": "ジュ",
        "EH": "ジェ",
        "EY": "ジェ",
        "AO": "ジョ",
        "OW": "ジョ",
        "OY": "ジョ",
        ISOLATED: "ジュ",
    },
    "DH": {
        "AA": "ザ",
        "AH": "ザ",
        "AE": "ザ",
        "AW": "ザ",
        "AY": "ザイ",
        "ER": "ザー",
        "IY": "ジ",
        "IH": "ジ",
        "UH": "ズ",
        "UW": "ズ",
        "EH": "ゼ",
        "EY": "ゼ",
        "AO": "ゾ",
        "OW": "ゾ",
        "OY": "ゾ",
        ISOLATED: "ズ",
    },
    "W": {
        "AA": "ワ",
        "AH": "ワ",
        "AE": "ワ",
        "AW": "ワ",
        "AY": "ワイ",
        "ER": "ウィ",
        "IY": "ウィ",
        "IH": "ウィ",
        "UH": "ウ",
        "UW": "ウ",
        "EH": "ウェ",
        "EY": "ウェ",
        "AO": "ウォ",
        "OW": "ウォ",
        "OY": "ウォ",
        ISOLATED: "ウ",
    },
    "NG": {
        "AA": "ンガ",
        "AH": "ンガ",
        "AE": "ンガ",
        "AW": "ンガ",
        "AY": "ンガイ",
        "ER": "ンギ",
        "IY": "ンギ",
        "IH": "ンギ",
        "UH": "ング",
        "UW": "ング",
        "EH": "ンゲ",
        "EY": "ンゲ",
        "AO": "ンゴ",
        "OW": "ンゴ",
        "OY": "ンゴ",
        ISOLATED: "ング",
    },
    "Y": {
        "AA": "ア",
        "AH": "ア",
        "AE": "ア",
        "AW": "ア",
        "AY": "アイ",
        "ER": "イ",
        "IY": "イ",
        "IH": "イ",
        "UH": "ュ",
        "UW": "ュ",
        "EH": "エ",
        "EY": "エ",
        "AO": "ョ",
        "OW": "ョ",
        "OY": "ョ",
        ISOLATED: "イ",
    },
    "TH": {
        "AA": "サ",
        "AH": "サ",
        "AE": "サ",
        "AW": "サ",
        "AY": "サイ",
        "ER": "シ",
        "IY": "シ",
        "IH": "シ",
        "UH": "ス",
        "UW": "ス",
        "EH": "セ",
        "EY": "セ",
        "AO": "ソ",
        "OW": "ソ",
        "OY": "ソ",
        ISOLATED: "ス",
    },
    "G": {
        "AA": "ガ",
        "AH": "ガ",
        "AE": "ガ",
        "AW": "ガ",
        "AY": "ガイ",
        "ER": "ギ",
        "IY": "ギ",
        "IH": "ギ",
        "UH": "グ",
        "UW": "グ",
        "EH": "ゲ",
        "EY": "ゲ",
        "AO": "ゴ",
        "OW": "ゴ",
        "OY": "ゴ",
        ISOLATED: "グ",
    },
    "CH": {
        "AA": "チャ",
        "AH": "チャ",
        "AE": "チャ",
        "AW": "チャ",
        "AY": "チャイ",
        "ER": "チ",
        "IY": "チ",
        "IH": "チ",
        "UH": "チュ",
        "UW": "チュ",
        "EH": "チェ",
        "EY": "チェ",
        "AO": "チョ",
        "OW": "チョ",
        "OY": "チョ",
        ISOLATED: "チ",
    },
    "D": {
        "AA": "ダ",
        "AH": "ダ",
        "AE": "ダ",
        "AW": "ダ",
        "AY": "ダイ",
        "ER": "ダー",
        "IY": "ディ",
        "IH": "ディ",
        "UH": "ドゥ",
        "UW": "ドゥ",
        "EH": "デ",
        "EY": "デ",
        "AO": "ド",
        "OW": "ド",
        "OY": "ド",
        ISOLATED: "ド",
    },
    "B": {
        "AA": "バ",
        "AH": "バ",
        "AE": "バ",
        "AW": "バウ",
        "AY": "バイ",
        "ER": "ビ",
        "IY": "ビ",
        "IH": "ビ",
        "UH": "ブ",
        "UW": "ブ",
        "EH": "ベ",
        "EY": "ベ",
        "AO": "ボ",
        "OW": "ボ",
        "OY": "ボ",
        ISOLATED: "ブ",
    },
    "SH": {
        "AA": "シャ",
        "AH": "ショ",
        "AE": "シャ",
        "AW": "シャ",
        "AY": "シャイ",
        "ER": "シ",
        "IY": "シー",
        "IH": "シ",
        "UH": "シュ",
        "UW": "シュ",
        "EH": "シェ",
        "EY": "シェ",
        "AO": "ショ",
        "OW": "ショ",
        "OY": "ショ",
        ISOLATED: "シ",
    },
    "F": {
        "AA": "ファ",
        "AH": "ファ",
        "AE": "ファ",
        "AW": "ファ",
        "AY": "ファイ",
        "ER": "フィ",
        "IY": "フィ",
        "IH": "フィ",
        "UH": "フ",
        "UW": "フ",
        "EH": "フェ",
        "EY": "フェ",
        "AO": "フォ",
        "OW": "フォ",
        "OY": "フォ",
        ISOLATED: "フ",
    },
    "K": {
        "AA": "カ",
        "AH": "カ",
        "AE": "カ",
        "AW": "カ",
        "AY": "カイ",
        "ER": "キ",
        "IY": "キ",
        "IH": "キ",
        "UH": "ク",
        "UW": "ク",
        "EH": "ケ",
        "EY": "ケ",
        "AO": "コ",
        "OW": "コ",
        "OY": "コ",
        ISOLATED: "ク",
    },
    "M": {
        "AA": "マ",
        "AH": "マ",
        "AE": "マ",
        "AW": "マウ",
        "AY": "マイ",
        "ER": "ミ",
        "IY": "ミ",
        "IH": "ミ",
        "UH": "ム",
        "UW": "ム",
        "EH": "メ",
        "EY": "メ",
        "AO": "モ",
        "OW": "モ",
        "OY": "モ",
        ISOLATED: "ム",
    },
    "R": {
        "AA": "ラ",
        "AH": "ラ",
        "AE": "ラ",
        "AW": "ラ",
        "AY": "ライ",
        "ER": "リ",
        "IY": "リ",
        "IH": "リ",
        "UH": "ル",
        "UW": "ル",
        "EH": "レ",
        "EY": "レ",
        "AO": "ロ",
        "OW": "ロ",
        "OY": "ロ",
        ISOLATED: "ー",
    },
    "V": {
        "AA": "バ",
        "AH": "バ",
        "AE": "ヴァ",
        "AW": "バ",
        "AY": "バイ",
        "ER": "ビ",
        "IY": "ビ",
        "IH": "ビ",
        "UH": "ブ",
        "UW": "ブ",
        "EH": "ベ",
        "EY": "ベ",
        "AO": "ボ",
        "OW": "ボ",
        "OY": "ボ",
        ISOLATED: "ブ",
    },
    "Z": {
        "AA": "ザ",
        "AH": "ザ",
        "AE": "ザ",
        "AW": "ザ",
        "AY": "ザイ",
        "ER": "ザー",
        "IY": "ジ",
        "IH": "ジ",
        "UH": "ズ",
        "UW": "ズ",
        "EH": "ゼ",
        "EY": "ゼ",
        "AO": "ゾ",
        "OW": "ゾ",
        "OY": "ゾ",
        ISOLATED: "ズ",
    },
    "N": {
        "AA": "ナ",
        "AH": "ナ",
        "AE": "ナ",
        "AW": "ナ",
        "AY": "ナイ",
        "ER": "ニ",
        "IY": "ニー",
        "IH": "ニ",
        "UH": "ヌ",
        "UW": "ヌ",
        "EH": "ネ",
        "EY": "ネ",
        "AO": "ノ",
        "OW": "ノ",
        "OY": "ノ",
        ISOLATED: "ン",
    },
    "P": {
        "AA": "パ",
        "AH": "パ",
        "AE": "パ",
        "AW": "パ",
        "AY": "パイ",
        "ER": "ピ",
        "IY": "ピ",
        "IH": "ピ",
        "UH": "プ",
        "UW": "プ",
        "EH": "ペ",
        "EY": "ペ",
        "AO": "ポ",
        "OW": "ポ",
        "OY": "ポ",
        ISOLATED: "プ",
    },
    "JH": {
        "AA": "ジャ",
        "AH": "ジャ",
        "AE": "ジャ",
        "AW": "ジャ",
        "AY": "ジャイ",
        "ER": "ジ",
        "IY": "ジ",
        "IH": "ジ",
        "UH": "ジュ",
        "UW": "ジュ",
        "EH": "ジェ",
        "EY": "ジェ",
        "AO": "ジョ",
        "OW": "ジョ",
        "OY": "ジョ",
        ISOLATED: "ジ",
    },
    "L": {
        "AA": "ラ",
        "AH": "ラ",
        "AE": "ラ",
        "AW": "ラ",
        "AY": "ライ",
        "ER": "ラー",
        "IY": "リー",
        "IH": "リ",
        "UH": "ル",
        "UW": "ル",
        "EH": "レ",
        "EY": "レ",
        "AO": "ロ",
        "OW": "ロー",
        "OY": "ロ",
        ISOLATED: "ル",
    },
    "HH": {
        "AA": "ハ",
        "AH": "ハ",
        "AE": "ハ",
        "AW": "ハウ",
        "AY": "ハイ",
        "ER": "ハリ",
        "IY": "ヒ",
        "IH": "ヒ",
        "UH": "フ",
        "UW": "フ",
        "EH": "ヘ",
        "EY": "ヘ",
        "AO": "ホ",
        "OW": "ホ",
        "OY": "ホ",
        ISOLATED: "フ",
    },
    "S": {
        "AA": "タ",
        "AH": "タ",
        "AE": "サ",
        "AW": "サ",
        "AY": "サイ",
        "ER": "サ",
        "IY": "シ",
        "IH": "シ",
        "UH": "ス",
        "UW": "ス",
        "EH": "セ",
        "EY": "セイ",
        "AO": "ソ",
        "OW": "ソ",
        "OY": "ソ",
        ISOLATED: "ス",
    },
    "T": {
        "AA": "トッ",
        "AH": "タ",
        "AE": "タ",
        "AW": "タ",
        "AY": "タイ",
        "ER": "タ",
        "IY": "ティ",
        "IH": "ティ",
        "UH": "チュ",
        "UW": "チュ",
        "EH": "テ",
        "EY": "テ",
        "AO": "ト",
        "OW": "ト",
        "OY": "ト",
        ISOLATED: "ト",
    },
    "AH": {
        "ER": "アエル",
        "OW": "アッアウ",
        ISOLATED: "ア",
    },
    "IH": {
        ISOLATED: "イ",
    },
    "EH": {
        "OW": "エオ",
        ISOLATED: "エ",
    },
    "AE": {
        ISOLATED: "ア",
    },
    "IY": {
        "AA": "イア",
        "IY": "イイ",
        "EY": "イー",
        "AH": "イア",
        "AE": "イア",
        "AO": "イオ",
        "ER": "アイヤー",
        "EH": "イエ",
        "IH": "ー",
        "UW": "イウ",
        "OW": "イオ",
        ISOLATED: "イー",
    },
    "AY": {
        "AH": "アイア",
        "AA": "アイ",
        "AW": "アイオウ",
        "AE": "アイェ",
        "ER": "アイア",
        "IH": "アイイ",
        "EH": "アイ",
        "IY": "ウイェ",
        "UW": "アユ",
        "OW": "アイオ",
        "EY": "ウイェ",
        ISOLATED: "アイ",
    },
    "ER": {
        "AA": "ア",
        "AY": "アライ",
        "AH": "ア",
        "AE": "アラ",
        "AW": "アラウ",
        "AO": "アロ",
        "EY": "アレイ",
        "ER": "アー",
        "EH": "オレ",
        "UH": "オロウ",
        "OW": "アロ",
        "OY": "アロイ",
        "UW": "ウル",
        "IH": "エリ",
        "IY": "エリ",
        ISOLATED: "アー",
    },
    "AO": {
        "EH": "アオエ",
        ISOLATED: "オ",
    },
    "EY": {
        "AA": "エイアー",
        "AH": "エイ",
        "ER": "エアー",
        "EY": "アー",
        "IY": "エイ",
        "EH": "エイ",
        "AO": "エイオ",
        "OW": "アオ",
        "AW": "アヨウ",
        ISOLATED: "エイ",
    },
    "OY": {
        "ER": "オイヤー",
        "OW": "オヨ",
        "IH": "オイエ",
        ISOLATED: "オイ",
    },
    "UW": {
        "AA": "ウア",
        "AH": "ウー",
        "ER": "ウアー",
        "EY": "ウエ",
        "IY": "ウイ",
        "IH": "ウエ",
        ISOLATED: "ウ",
    },
    "AA": {
        "UW": "オウ",
        "IY": "アイ",
        ISOLATED: "アー",
    },
    "AW": {
        "AH": "アウア",
        "IY": "アオイ",
        "UW": "アオウ",
        "ER": "アワー",
        "IH": "アウィ",
        ISOLATED: "オウ",
    },
    "UH": {
        "AH": "ウー",
        ISOLATED: "ウ",
    },
    "OW": {
        "AA": "オア",
        "AO": "オウォ",
        "AH": "オア",
        "AE": "オエ",
        "IY": "オイ",
        "IH": "オーウィ",
        "UH": "オウ",
        "EY": "オウエイ",
        "EH": "オフエ",
        ISOLATED: "オー",
    },
}

DIGRAPH_TABLE: Final[Mapping[str, Mapping[str | None, str]]] = MappingProxyType(
    {outer: MappingProxyType(inner) for outer, inner in _DIGRAPHS.items()}
)

__all__ = ["DIGRAPH_TABLE", "ISOLATED", "VOWELS"]
