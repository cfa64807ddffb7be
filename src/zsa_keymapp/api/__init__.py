"""
Keymapp gRPC Schema.

The message and service definitions are owned by Keymapp itself and live
unmodified in `keymapp.proto` next to this module. They are compiled when
this package is first imported (`grpc.protos_and_services`, backed by
`grpcio-tools`), so no generated `_pb2` modules are checked in.
"""
import grpc

PROTO_FILE = "zsa_keymapp/api/keymapp.proto"

keymapp_pb2, keymapp_pb2_grpc = grpc.protos_and_services(PROTO_FILE)

KeyboardServiceStub = keymapp_pb2_grpc.KeyboardServiceStub
KeyboardServiceServicer = keymapp_pb2_grpc.KeyboardServiceServicer
add_KeyboardServiceServicer_to_server = keymapp_pb2_grpc.add_KeyboardServiceServicer_to_server

# Messages exposed to callers
Keyboard = keymapp_pb2.Keyboard
ConnectedKeyboard = keymapp_pb2.ConnectedKeyboard
GetStatusRequest = keymapp_pb2.GetStatusRequest
GetStatusReply = keymapp_pb2.GetStatusReply
GetKeyboardsRequest = keymapp_pb2.GetKeyboardsRequest
GetKeyboardsReply = keymapp_pb2.GetKeyboardsReply
ConnectKeyboardRequest = keymapp_pb2.ConnectKeyboardRequest
ConnectAnyKeyboardRequest = keymapp_pb2.ConnectAnyKeyboardRequest
ConnectKeyboardReply = keymapp_pb2.ConnectKeyboardReply
DisconnectKeyboardRequest = keymapp_pb2.DisconnectKeyboardRequest
DisconnectKeyboardReply = keymapp_pb2.DisconnectKeyboardReply
SetLayerRequest = keymapp_pb2.SetLayerRequest
SetLayerReply = keymapp_pb2.SetLayerReply
SetRGBLedRequest = keymapp_pb2.SetRGBLedRequest
SetRGBLedReply = keymapp_pb2.SetRGBLedReply
SetRGBAllRequest = keymapp_pb2.SetRGBAllRequest
SetRGBAllReply = keymapp_pb2.SetRGBAllReply
SetStatusLedRequest = keymapp_pb2.SetStatusLedRequest
SetStatusLedReply = keymapp_pb2.SetStatusLedReply
IncreaseBrightnessRequest = keymapp_pb2.IncreaseBrightnessRequest
IncreaseBrightnessReply = keymapp_pb2.IncreaseBrightnessReply
DecreaseBrightnessRequest = keymapp_pb2.DecreaseBrightnessRequest
DecreaseBrightnessReply = keymapp_pb2.DecreaseBrightnessReply
