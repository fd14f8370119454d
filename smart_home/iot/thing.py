from typing import Any, Callable, Dict, List


class ValueType:
    """デバイスのプロパティおよびメソッドパラメータの値の型定義クラス."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"


def infer_value_type(value: Any) -> str:
    """値からValueTypeを判定.

    boolはintのサブクラスのため、NUMBERより先に判定する。

    Raises:
        TypeError: サポートされていない型の場合
    """
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueType.NUMBER
    if isinstance(value, str):
        return ValueType.STRING
    raise TypeError(f"サポートされていない値の型: {type(value).__name__}")


class Property:
    """デバイスの状態を表すプロパティ.

    プロパティの型は、登録時のゲッター関数の戻り値から自動的に推測されます。
    """

    def __init__(self, name: str, description: str, getter: Callable[[], Any]):
        """プロパティを初期化.

        Args:
            name: プロパティ名
            description: プロパティの説明
            getter: プロパティ値を取得するコールバック関数
        """
        self.name = name
        self.description = description
        self.getter = getter
        self.type = infer_value_type(getter())

    def get_descriptor_json(self) -> Dict:
        return {"description": self.description, "type": self.type}

    def get_state_value(self) -> Any:
        return self.getter()


class Parameter:
    """デバイスメソッドのパラメータ定義.

    値そのものは保持しない。呼び出しごとの値はMethod.invokeが
    辞書として組み立ててコールバックに渡す。
    """

    def __init__(self, name: str, description: str, type_: str, required: bool = True):
        """パラメータを初期化.

        Args:
            name: パラメータ名
            description: パラメータの説明
            type_: パラメータの型 (ValueType定数を使用)
            required: パラメータが必須かどうか
        """
        self.name = name
        self.description = description
        self.type = type_
        self.required = required

    def get_descriptor_json(self) -> Dict:
        return {"description": self.description, "type": self.type}

    def check(self, value: Any) -> None:
        """値が宣言された型と一致するか検証.

        Raises:
            TypeError: 型が一致しない場合
        """
        try:
            actual = infer_value_type(value)
        except TypeError:
            actual = type(value).__name__
        if actual != self.type:
            raise TypeError(
                f"パラメータ {self.name} の型が不正です: {self.type} を期待しましたが {actual} でした"
            )


class Method:
    """デバイスが実行可能なメソッド."""

    def __init__(
        self,
        name: str,
        description: str,
        parameters: List[Parameter],
        callback: Callable[[Dict[str, Any]], Any],
    ):
        """メソッドを初期化.

        Args:
            name: メソッド名
            description: メソッドの説明
            parameters: メソッドが受け取るパラメータのリスト
            callback: パラメータ名と値の辞書を受け取るコールバック関数
        """
        self.name = name
        self.description = description
        self.parameters = {param.name: param for param in parameters}
        self.callback = callback

    def get_descriptor_json(self) -> Dict:
        return {
            "description": self.description,
            "parameters": {
                name: param.get_descriptor_json()
                for name, param in self.parameters.items()
            },
        }

    def invoke(self, params: Dict[str, Any]) -> Any:
        """メソッドを実行.

        未定義のパラメータ名は無視される。

        Args:
            params: メソッドに渡すパラメータの辞書

        Returns:
            Any: コールバックの戻り値

        Raises:
            ValueError: 必須パラメータが不足している場合
            TypeError: パラメータの型が一致しない場合
        """
        values = {}
        for name, param in self.parameters.items():
            if name not in params or params[name] is None:
                if param.required:
                    raise ValueError(f"必須パラメータが不足: {name}")
                continue
            param.check(params[name])
            values[name] = params[name]

        return self.callback(values)


class Thing:
    """デバイスの基底クラス.

    プロパティ（状態）とメソッド（操作）を名前で登録し、
    記述子・状態のJSON表現と名前によるメソッド呼び出しを提供します。
    """

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.properties: Dict[str, Property] = {}
        self.methods: Dict[str, Method] = {}

    def add_property(self, name: str, description: str, getter: Callable) -> None:
        self.properties[name] = Property(name, description, getter)

    def add_method(
        self,
        name: str,
        description: str,
        parameters: List[Parameter],
        callback: Callable,
    ) -> None:
        self.methods[name] = Method(name, description, parameters, callback)

    def get_descriptor_json(self) -> Dict:
        """デバイスの完全な記述子を取得.

        Returns:
            Dict: デバイス名、説明、プロパティ、メソッドの情報を含む辞書
        """
        return {
            "name": self.name,
            "description": self.description,
            "properties": {
                name: prop.get_descriptor_json()
                for name, prop in self.properties.items()
            },
            "methods": {
                name: method.get_descriptor_json()
                for name, method in self.methods.items()
            },
        }

    def get_state_json(self) -> Dict:
        """デバイスの現在の状態を取得.

        Returns:
            Dict: デバイス名と全プロパティの現在値を含む辞書
        """
        return {
            "name": self.name,
            "state": {
                name: prop.get_state_value() for name, prop in self.properties.items()
            },
        }

    def invoke(self, command: Dict) -> Any:
        """デバイスのメソッドを実行.

        Args:
            command: 実行するメソッド名("method")とパラメータ("parameters")を含む辞書

        Raises:
            ValueError: 指定されたメソッドが存在しない場合
        """
        method_name = command.get("method")
        if method_name not in self.methods:
            raise ValueError(f"メソッドが存在しません: {method_name}")

        parameters = command.get("parameters") or {}
        return self.methods[method_name].invoke(parameters)
